from starlette.datastructures import URL

from app.core.config import settings


# --- ALERTAS (las lee el frontend para mostrar notificaciones) ---

def _alert(message: str, param: str) -> dict:
    return {
        f"X-{settings.APP_NAME}-alert": message,
        f"X-{settings.APP_NAME}-params": param,
    }

def entity_creation_alert(entity_name: str, param: str) -> dict:
    return _alert(f"A new {entity_name} is created with identifier {param}", param)

def entity_update_alert(entity_name: str, param: str) -> dict:
    return _alert(f"A {entity_name} is updated with identifier {param}", param)

def entity_deletion_alert(entity_name: str, param: str) -> dict:
    return _alert(f"A {entity_name} is deleted with identifier {param}", param)


# --- PAGINACIÓN ---

def pagination_headers(url: URL, page: int, size: int, total: int, total_pages: int) -> dict:
    """
    Cabeceras X-Total-Count y Link (next, prev, last, first).
    Cada enlace es la URL actual cambiando solo `page` y `size`.
    """
    def link(target_page: int, rel: str) -> str:
        return f'<{url.include_query_params(page=target_page, size=size)}>; rel="{rel}"'

    links = []
    if page < total_pages - 1:
        links.append(link(page + 1, "next"))
    if page > 0:
        links.append(link(page - 1, "prev"))
    links.append(link(max(total_pages - 1, 0), "last"))
    links.append(link(0, "first"))

    return {
        "X-Total-Count": str(total),
        "Link": ",".join(links),
    }
