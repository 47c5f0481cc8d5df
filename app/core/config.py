from typing import List, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Base de Datos
    DATABASE_URL: str

    # Nombre de la aplicación (prefijo de las cabeceras X-<app>-alert)
    APP_NAME: str = "partidasApp"
    LOG_LEVEL: str = "INFO"

    # Fichero JSON con la relación externa Partida <-> Juego / Jugador
    ASOCIACIONES_PATH: Optional[str] = None

    # --- PAGINACIÓN ---
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 2000

    # --- CORS ---
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # React / Next.js por defecto
        "http://localhost:5173",  # Vite / Vue por defecto
        "http://localhost:9000",  # Frontend webpack de JHipster
    ]

    class Config:
        env_file = ".env"
        extra = "ignore" # Ignora variables extra en el .env si las hubiera

settings = Settings()
