"""
Relación externa Partida <-> Juego <-> Jugador.

El esquema de Juego y Jugador no pertenece a este servicio: solo
necesitamos saber qué partidas corresponden a un juego (por nombre) o a un
jugador (por apodo). Esa consulta se hace a través de `AsociacionesPartida`,
y la implementación por defecto es un registro en memoria que se puede
cargar desde un JSON con la forma:

    {
        "juegos": {"Ajedrez": [1, 2]},
        "jugadores": {"pepe": [1]}
    }
"""

import json
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Optional, Set

from app.core.config import settings

logger = logging.getLogger(__name__)


class AsociacionesPartida(ABC):
    @abstractmethod
    def ids_por_juego(self, nombre: str) -> Set[int]:
        """Ids de las partidas del juego con ese nombre."""

    @abstractmethod
    def ids_por_apodo(self, apodo: str) -> Set[int]:
        """Ids de las partidas de los juegos en los que participa ese jugador."""


class AsociacionesEnMemoria(AsociacionesPartida):
    def __init__(self, juegos: Optional[Dict[str, Iterable[int]]] = None,
                 jugadores: Optional[Dict[str, Iterable[int]]] = None):
        self._juegos: Dict[str, Set[int]] = {k: set(v) for k, v in (juegos or {}).items()}
        self._jugadores: Dict[str, Set[int]] = {k: set(v) for k, v in (jugadores or {}).items()}

    def registrar_juego(self, nombre: str, *partida_ids: int) -> None:
        self._juegos.setdefault(nombre, set()).update(partida_ids)

    def registrar_jugador(self, apodo: str, *partida_ids: int) -> None:
        self._jugadores.setdefault(apodo, set()).update(partida_ids)

    def ids_por_juego(self, nombre: str) -> Set[int]:
        return set(self._juegos.get(nombre, ()))

    def ids_por_apodo(self, apodo: str) -> Set[int]:
        return set(self._jugadores.get(apodo, ()))

    @classmethod
    def desde_json(cls, path: str) -> "AsociacionesEnMemoria":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(juegos=data.get("juegos"), jugadores=data.get("jugadores"))


@lru_cache
def get_asociaciones() -> AsociacionesPartida:
    if settings.ASOCIACIONES_PATH:
        logger.info("Cargando asociaciones de partidas desde %s", settings.ASOCIACIONES_PATH)
        return AsociacionesEnMemoria.desde_json(settings.ASOCIACIONES_PATH)
    logger.warning("ASOCIACIONES_PATH no configurado: los buscadores por juego/jugador devolverán listas vacías")
    return AsociacionesEnMemoria()
