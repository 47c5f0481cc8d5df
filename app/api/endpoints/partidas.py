import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import get_db
from app.core.errors import BadRequestAlertException, NotFoundException
from app.core.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
    pagination_headers,
)
from app.repositories.asociaciones import AsociacionesPartida, get_asociaciones
from app.repositories.partida_repository import PartidaRepository
from app.schemas.criteria import Pageable, PartidaCriteria
from app.schemas.partida import (
    MAX_INTEGER,
    MAX_LONG,
    MIN_INTEGER,
    MIN_LONG,
    PartidaIn,
    PartidaPatch,
    PartidaResponse,
)
from app.services.partida_query_service import PartidaQueryService
from app.services.partida_service import PartidaService

logger = logging.getLogger(__name__)

ENTITY_NAME = "partida"

router = APIRouter()
# Rutas de los dos buscadores sin el prefijo /api (clientes antiguos)
legacy_router = APIRouter(include_in_schema=False)


# --- DEPENDENCIAS ---

def get_partida_service(db: Session = Depends(get_db)) -> PartidaService:
    return PartidaService(db)

def get_partida_repository(db: Session = Depends(get_db)) -> PartidaRepository:
    return PartidaRepository(db)

def get_partida_query_service(
    db: Session = Depends(get_db),
    asociaciones: AsociacionesPartida = Depends(get_asociaciones),
) -> PartidaQueryService:
    return PartidaQueryService(db, asociaciones)

# Los filtros .in admiten valores repetidos (id.in=1&id.in=2) o separados por comas (id.in=1,2)
_LIST_ALIASES = {"id_in": "id.in", "ganador_in": "ganador.in", "perdedor_in": "perdedor.in"}

def _split_csv(values: Optional[List[str]]) -> Optional[List[str]]:
    if not values:
        return None
    return [item.strip() for raw in values for item in raw.split(",") if item.strip()]

def partida_criteria(
    id_equals: Optional[int] = Query(None, alias="id.equals", ge=MIN_LONG, le=MAX_LONG),
    id_in: Optional[List[str]] = Query(None, alias="id.in"),
    ganador_equals: Optional[str] = Query(None, alias="ganador.equals"),
    ganador_contains: Optional[str] = Query(None, alias="ganador.contains"),
    ganador_in: Optional[List[str]] = Query(None, alias="ganador.in"),
    perdedor_equals: Optional[str] = Query(None, alias="perdedor.equals"),
    perdedor_contains: Optional[str] = Query(None, alias="perdedor.contains"),
    perdedor_in: Optional[List[str]] = Query(None, alias="perdedor.in"),
    puntos_equals: Optional[int] = Query(None, alias="puntosDelGanador.equals", ge=MIN_INTEGER, le=MAX_INTEGER),
    puntos_greater_than: Optional[int] = Query(None, alias="puntosDelGanador.greaterThan", ge=MIN_INTEGER, le=MAX_INTEGER),
    puntos_less_than: Optional[int] = Query(None, alias="puntosDelGanador.lessThan", ge=MIN_INTEGER, le=MAX_INTEGER),
    puntos_greater_than_or_equal: Optional[int] = Query(None, alias="puntosDelGanador.greaterThanOrEqual", ge=MIN_INTEGER, le=MAX_INTEGER),
    puntos_less_than_or_equal: Optional[int] = Query(None, alias="puntosDelGanador.lessThanOrEqual", ge=MIN_INTEGER, le=MAX_INTEGER),
    puntos_specified: Optional[bool] = Query(None, alias="puntosDelGanador.specified"),
) -> PartidaCriteria:
    values = dict(
        id_equals=id_equals,
        id_in=_split_csv(id_in),
        ganador_equals=ganador_equals,
        ganador_contains=ganador_contains,
        ganador_in=_split_csv(ganador_in),
        perdedor_equals=perdedor_equals,
        perdedor_contains=perdedor_contains,
        perdedor_in=_split_csv(perdedor_in),
        puntos_equals=puntos_equals,
        puntos_greater_than=puntos_greater_than,
        puntos_less_than=puntos_less_than,
        puntos_greater_than_or_equal=puntos_greater_than_or_equal,
        puntos_less_than_or_equal=puntos_less_than_or_equal,
        puntos_specified=puntos_specified,
    )
    try:
        return PartidaCriteria(**values)
    except ValidationError as e:
        # Solo pueden fallar aquí los ids de id.in (el resto lo valida Query)
        raise RequestValidationError([
            {**err, "loc": ("query", _LIST_ALIASES.get(err["loc"][0], err["loc"][0]))}
            for err in e.errors(include_url=False)
        ]) from e

def pageable(
    page: int = Query(0, ge=0, description="Página (empieza en 0)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, description="Elementos por página"),
    sort: List[str] = Query([], description="Orden: propiedad,asc|desc (se puede repetir)"),
) -> Pageable:
    return Pageable(page=page, size=min(size, settings.MAX_PAGE_SIZE), sort=sort)


def _check_identity(path_id: int, body_id: Optional[int], repo: PartidaRepository) -> None:
    if body_id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    if path_id != body_id:
        raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")
    if not repo.exists(path_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")


# --- CRUD ---

@router.post("/partidas", response_model=PartidaResponse, status_code=status.HTTP_201_CREATED)
def create_partida(
    partida: PartidaIn,
    response: Response,
    service: PartidaService = Depends(get_partida_service),
):
    """Crea una partida nueva. No puede traer id: lo asigna la base de datos."""
    logger.debug("REST request to save Partida : %s", partida)
    if partida.id is not None:
        raise BadRequestAlertException("A new partida cannot already have an ID", ENTITY_NAME, "idexists")
    result = service.save(partida)
    response.headers["Location"] = f"/api/partidas/{result.id}"
    response.headers.update(entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result

@router.put("/partidas/{id}", response_model=PartidaResponse)
def update_partida(
    partida: PartidaIn,
    response: Response,
    id: int = Path(..., ge=MIN_LONG, le=MAX_LONG),
    service: PartidaService = Depends(get_partida_service),
    repo: PartidaRepository = Depends(get_partida_repository),
):
    """Reemplaza una partida existente. El id del path y el del cuerpo deben coincidir."""
    logger.debug("REST request to update Partida : %s, %s", id, partida)
    _check_identity(id, partida.id, repo)
    result = service.update(partida)
    response.headers.update(entity_update_alert(ENTITY_NAME, str(partida.id)))
    return result

@router.patch("/partidas/{id}", response_model=PartidaResponse)
def partial_update_partida(
    partida: PartidaPatch,
    response: Response,
    id: int = Path(..., ge=MIN_LONG, le=MAX_LONG),
    service: PartidaService = Depends(get_partida_service),
    repo: PartidaRepository = Depends(get_partida_repository),
):
    """
    Actualización parcial (application/json o application/merge-patch+json).
    Los campos nulos o ausentes se ignoran.
    """
    logger.debug("REST request to partial update Partida partially : %s, %s", id, partida)
    _check_identity(id, partida.id, repo)
    result = service.partial_update(partida)
    if result is None:
        raise NotFoundException(ENTITY_NAME)
    response.headers.update(entity_update_alert(ENTITY_NAME, str(partida.id)))
    return result

@router.get("/partidas", response_model=list[PartidaResponse])
def get_all_partidas(
    request: Request,
    response: Response,
    criteria: PartidaCriteria = Depends(partida_criteria),
    paging: Pageable = Depends(pageable),
    query_service: PartidaQueryService = Depends(get_partida_query_service),
):
    logger.debug("REST request to get Partidas by criteria: %s", criteria)
    page = query_service.find_by_criteria(criteria, paging)
    response.headers.update(
        pagination_headers(request.url, page.page, page.size, page.total, page.total_pages)
    )
    return page.content

@router.get("/partidas/count", response_model=int)
def count_partidas(
    criteria: PartidaCriteria = Depends(partida_criteria),
    query_service: PartidaQueryService = Depends(get_partida_query_service),
):
    logger.debug("REST request to count Partidas by criteria: %s", criteria)
    return query_service.count_by_criteria(criteria)

@router.get("/partidas/{id}", response_model=PartidaResponse)
def get_partida(
    id: int = Path(..., ge=MIN_LONG, le=MAX_LONG),
    service: PartidaService = Depends(get_partida_service),
):
    logger.debug("REST request to get Partida : %s", id)
    partida = service.find_one(id)
    if partida is None:
        raise NotFoundException(ENTITY_NAME)
    return partida

@router.delete("/partidas/{id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_partida(
    id: int = Path(..., ge=MIN_LONG, le=MAX_LONG),
    service: PartidaService = Depends(get_partida_service),
):
    logger.debug("REST request to delete Partida : %s", id)
    service.delete(id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=entity_deletion_alert(ENTITY_NAME, str(id)),
    )


# --- BUSCADORES ---

@router.get("/ganadoresDeJuego", response_model=list[PartidaResponse])
def get_ganadores_de_juego(
    nombre: Optional[str] = Query(None, description="Nombre del juego"),
    query_service: PartidaQueryService = Depends(get_partida_query_service),
):
    """Partidas de un juego, ordenadas por ganador (A-Z)."""
    logger.debug("REST request to get Partidas by Juego nombre : %s", nombre)
    if nombre is None:
        raise BadRequestAlertException("El nombre no es correcto", ENTITY_NAME, "nombrenull")
    return query_service.find_by_juego_nombre_order_by_ganador_asc(nombre)

@router.get("/partidasGanadas", response_model=list[PartidaResponse])
def get_partidas_ganadas(
    apodo: Optional[str] = Query(None, description="Apodo del jugador"),
    query_service: PartidaQueryService = Depends(get_partida_query_service),
):
    """Partidas de los juegos de un jugador, ordenadas por ganador (A-Z)."""
    logger.debug("REST request to get Partidas by Jugador apodo : %s", apodo)
    if apodo is None:
        raise BadRequestAlertException("El apodo no es correcto", ENTITY_NAME, "apodonull")
    return query_service.find_by_juego_jugadores_apodo_order_by_ganador_asc(apodo)


legacy_router.add_api_route(
    "/ganadoresDeJuego", get_ganadores_de_juego, methods=["GET"], response_model=list[PartidaResponse]
)
legacy_router.add_api_route(
    "/partidasGanadas", get_partidas_ganadas, methods=["GET"], response_model=list[PartidaResponse]
)
