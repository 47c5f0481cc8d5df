from typing import Optional

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.core.database import Base

class Partida(Base):
    __tablename__ = "partida"
    __table_args__ = (
        CheckConstraint("puntos_del_ganador >= 0", name="ck_partida_puntos_no_negativos"),
    )

    # Lo asigna la base de datos al insertar
    id: Mapped[Optional[int]] = mapped_column(Integer, primary_key=True, autoincrement=True)

    ganador: Mapped[str] = mapped_column(String(255), nullable=False)
    perdedor: Mapped[str] = mapped_column(String(255), nullable=False)
    puntos_del_ganador: Mapped[int] = mapped_column(Integer, nullable=False)

    def __eq__(self, other):
        """
        Igualdad por identidad: dos partidas son iguales solo si ambas
        tienen id y es el mismo. Sin id, solo es igual a sí misma.
        """
        if self is other:
            return True
        if not isinstance(other, Partida):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self):
        # Constante por clase: el id cambia al persistir
        return hash(Partida)

    def __repr__(self):
        return (
            f"Partida{{id={self.id}, ganador='{self.ganador}', "
            f"perdedor='{self.perdedor}', puntosDelGanador={self.puntos_del_ganador}}}"
        )
