import logging
from typing import Optional

from sqlalchemy.orm import Session
from app.models.partida import Partida
from app.repositories.partida_repository import PartidaRepository
from app.schemas.partida import PartidaIn, PartidaPatch

logger = logging.getLogger(__name__)

class PartidaService:
    def __init__(self, db: Session):
        self.repo = PartidaRepository(db)

    def save(self, data: PartidaIn) -> Partida:
        logger.debug("Request to save Partida : %s", data)
        partida = Partida(
            id=data.id,
            ganador=data.ganador,
            perdedor=data.perdedor,
            puntos_del_ganador=data.puntos_del_ganador,
        )
        return self.repo.save(partida)

    def update(self, data: PartidaIn) -> Partida:
        """Reemplaza la partida guardada con todos los campos recibidos."""
        logger.debug("Request to update Partida : %s", data)
        return self.save(data)

    def partial_update(self, data: PartidaPatch) -> Optional[Partida]:
        """
        Merge-patch: solo los campos no nulos sobrescriben los guardados.
        Devuelve None si la partida ya no existe.
        """
        logger.debug("Request to partially update Partida : %s", data)
        existing = self.repo.get(data.id)
        if existing is None:
            return None
        for field, value in data.cambios().items():
            setattr(existing, field, value)
        return self.repo.save(existing)

    def find_one(self, partida_id: int) -> Optional[Partida]:
        logger.debug("Request to get Partida : %s", partida_id)
        return self.repo.get(partida_id)

    def delete(self, partida_id: int) -> None:
        logger.debug("Request to delete Partida : %s", partida_id)
        self.repo.delete(partida_id)
