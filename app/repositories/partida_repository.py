from typing import Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from app.models.partida import Partida

class PartidaRepository:
    """
    Acceso a la tabla `partida`. Solo expone lo que usa la API:
    get, exists, save, delete, find (por condiciones) y count.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, partida_id: int) -> Optional[Partida]:
        return self.db.get(Partida, partida_id)

    def exists(self, partida_id: int) -> bool:
        stmt = select(Partida.id).where(Partida.id == partida_id)
        return self.db.execute(stmt).first() is not None

    def save(self, partida: Partida) -> Partida:
        """Inserta o actualiza (según tenga id o no) y devuelve la fila refrescada."""
        if partida.id is not None:
            partida = self.db.merge(partida)
        else:
            self.db.add(partida)
        self.db.commit()
        self.db.refresh(partida)
        return partida

    def delete(self, partida_id: int) -> None:
        partida = self.get(partida_id)
        if partida is None:
            return
        self.db.delete(partida)
        self.db.commit()

    def find(self, conditions: Sequence = (), order_by: Sequence = (),
             offset: Optional[int] = None, limit: Optional[int] = None) -> list[Partida]:
        stmt = select(Partida).where(*conditions).order_by(*order_by)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.scalars(stmt).all())

    def count(self, conditions: Sequence = ()) -> int:
        stmt = select(func.count(Partida.id)).where(*conditions)
        return self.db.execute(stmt).scalar_one()
