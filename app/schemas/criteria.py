from typing import Annotated, List, Optional, Tuple

from pydantic import BaseModel, Field

from app.schemas.partida import MAX_INTEGER, MAX_LONG, MIN_INTEGER, MIN_LONG

Long = Annotated[int, Field(ge=MIN_LONG, le=MAX_LONG)]
Integer = Annotated[int, Field(ge=MIN_INTEGER, le=MAX_INTEGER)]

# Propiedades JSON por las que se puede ordenar -> atributo del modelo
SORTABLE_PROPERTIES = {
    "id": "id",
    "ganador": "ganador",
    "perdedor": "perdedor",
    "puntosDelGanador": "puntos_del_ganador",
}


class PartidaCriteria(BaseModel):
    """
    Filtros admitidos por GET /api/partidas y /api/partidas/count.

    Cada atributo corresponde a un parámetro de query con el formato
    `<campo>.<operador>` (ej: `ganador.contains=Ana`). Los que llegan a
    None no filtran.
    """

    id_equals: Optional[Long] = None
    id_in: Optional[List[Long]] = None

    ganador_equals: Optional[str] = None
    ganador_contains: Optional[str] = None
    ganador_in: Optional[List[str]] = None

    perdedor_equals: Optional[str] = None
    perdedor_contains: Optional[str] = None
    perdedor_in: Optional[List[str]] = None

    puntos_equals: Optional[Integer] = None
    puntos_greater_than: Optional[Integer] = None
    puntos_less_than: Optional[Integer] = None
    puntos_greater_than_or_equal: Optional[Integer] = None
    puntos_less_than_or_equal: Optional[Integer] = None
    puntos_specified: Optional[bool] = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class Pageable(BaseModel):
    page: int = Field(0, ge=0)
    size: int = Field(20, ge=1)
    # Cada elemento tiene la forma "propiedad" o "propiedad,asc|desc"
    sort: List[str] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size

    def orders(self) -> List[Tuple[str, bool]]:
        """Devuelve [(propiedad, ascendente)] tal y como llegan en `sort`."""
        result = []
        for raw in self.sort:
            parts = [p.strip() for p in raw.split(",") if p.strip()]
            if not parts:
                continue
            direction = "asc"
            if len(parts) > 1 and parts[-1].lower() in ("asc", "desc"):
                direction = parts[-1].lower()
                parts = parts[:-1]
            for prop in parts:
                result.append((prop, direction == "asc"))
        return result
