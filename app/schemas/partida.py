from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Rangos de las columnas: INTEGER para los puntos, BIGINT para el id
MIN_INTEGER, MAX_INTEGER = -2**31, 2**31 - 1
MIN_LONG, MAX_LONG = -2**63, 2**63 - 1

# 1. INPUT (POST / PUT): todos los campos obligatorios salvo el id
class PartidaIn(BaseModel):
    id: Optional[int] = Field(default=None, ge=MIN_LONG, le=MAX_LONG)
    ganador: str
    perdedor: str
    puntos_del_ganador: int = Field(alias="puntosDelGanador", ge=0, le=MAX_INTEGER)

    model_config = ConfigDict(populate_by_name=True)

# 2. INPUT (PATCH): merge-patch, lo que llega a null no se toca
class PartidaPatch(BaseModel):
    id: Optional[int] = Field(default=None, ge=MIN_LONG, le=MAX_LONG)
    ganador: Optional[str] = None
    perdedor: Optional[str] = None
    puntos_del_ganador: Optional[int] = Field(default=None, alias="puntosDelGanador", ge=0, le=MAX_INTEGER)

    model_config = ConfigDict(populate_by_name=True)

    def cambios(self) -> dict:
        """Campos con valor (no nulos) que hay que volcar sobre la partida guardada."""
        return self.model_dump(exclude_none=True, exclude={"id"})

# 3. OUTPUT: DTO limpio
class PartidaResponse(BaseModel):
    id: int
    ganador: str
    perdedor: str
    puntos_del_ganador: int = Field(alias="puntosDelGanador")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
