import logging
import math
from dataclasses import dataclass
from typing import List

from sqlalchemy.orm import Session
from app.core.errors import BadRequestAlertException
from app.models.partida import Partida
from app.repositories.asociaciones import AsociacionesPartida
from app.repositories.partida_repository import PartidaRepository
from app.schemas.criteria import SORTABLE_PROPERTIES, Pageable, PartidaCriteria

logger = logging.getLogger(__name__)

ENTITY_NAME = "partida"


@dataclass
class Page:
    content: List[Partida]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0


def build_conditions(criteria: PartidaCriteria) -> list:
    """Traduce los filtros a expresiones SQLAlchemy (se combinan con AND)."""
    c = criteria
    conditions = []

    if c.id_equals is not None:
        conditions.append(Partida.id == c.id_equals)
    if c.id_in:
        conditions.append(Partida.id.in_(c.id_in))

    # Filtros de texto
    for column, equals, contains, values in (
        (Partida.ganador, c.ganador_equals, c.ganador_contains, c.ganador_in),
        (Partida.perdedor, c.perdedor_equals, c.perdedor_contains, c.perdedor_in),
    ):
        if equals is not None:
            conditions.append(column == equals)
        if contains is not None:
            # Igual que el 'like' de JPA: sin distinguir mayúsculas
            conditions.append(column.ilike(f"%{contains}%"))
        if values:
            conditions.append(column.in_(values))

    # Filtros numéricos
    puntos = Partida.puntos_del_ganador
    if c.puntos_equals is not None:
        conditions.append(puntos == c.puntos_equals)
    if c.puntos_greater_than is not None:
        conditions.append(puntos > c.puntos_greater_than)
    if c.puntos_less_than is not None:
        conditions.append(puntos < c.puntos_less_than)
    if c.puntos_greater_than_or_equal is not None:
        conditions.append(puntos >= c.puntos_greater_than_or_equal)
    if c.puntos_less_than_or_equal is not None:
        conditions.append(puntos <= c.puntos_less_than_or_equal)
    if c.puntos_specified is not None:
        conditions.append(puntos.is_not(None) if c.puntos_specified else puntos.is_(None))

    return conditions


def build_order_by(pageable: Pageable) -> list:
    order_by = []
    for prop, ascending in pageable.orders():
        attr = SORTABLE_PROPERTIES.get(prop)
        if attr is None:
            raise BadRequestAlertException(
                f"No property '{prop}' found for type 'Partida'", ENTITY_NAME, "sortinvalid"
            )
        column = getattr(Partida, attr)
        order_by.append(column.asc() if ascending else column.desc())
    # Desempate estable para que las páginas no se solapen
    order_by.append(Partida.id.asc())
    return order_by


class PartidaQueryService:
    def __init__(self, db: Session, asociaciones: AsociacionesPartida):
        self.repo = PartidaRepository(db)
        self.asociaciones = asociaciones

    def find_by_criteria(self, criteria: PartidaCriteria, pageable: Pageable) -> Page:
        logger.debug("find by criteria : %s, page: %s", criteria, pageable)
        conditions = build_conditions(criteria)
        total = self.repo.count(conditions)
        content = self.repo.find(
            conditions,
            order_by=build_order_by(pageable),
            offset=pageable.offset,
            limit=pageable.size,
        )
        return Page(content=content, total=total, page=pageable.page, size=pageable.size)

    def count_by_criteria(self, criteria: PartidaCriteria) -> int:
        logger.debug("count by criteria : %s", criteria)
        return self.repo.count(build_conditions(criteria))

    def find_by_juego_nombre_order_by_ganador_asc(self, nombre: str) -> List[Partida]:
        ids = self.asociaciones.ids_por_juego(nombre)
        return self._find_by_ids_order_by_ganador(ids)

    def find_by_juego_jugadores_apodo_order_by_ganador_asc(self, apodo: str) -> List[Partida]:
        ids = self.asociaciones.ids_por_apodo(apodo)
        return self._find_by_ids_order_by_ganador(ids)

    def _find_by_ids_order_by_ganador(self, ids) -> List[Partida]:
        if not ids:
            return []
        return self.repo.find(
            [Partida.id.in_(sorted(ids))],
            order_by=[Partida.ganador.asc(), Partida.id.asc()],
        )
