import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.endpoints import partidas
from app.core.config import settings
from app.core.errors import register_exception_handlers

# --- 0. LOGGING ---
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(
    title="Partidas API",
    description="Registro de partidas: ganador, perdedor y puntos del ganador",
    version="1.0.0"
)

# --- 1. CONFIGURACIÓN DE CORS ---
# Exponemos las cabeceras de paginación y de alertas para que el
# frontend pueda leerlas.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Link",
        "X-Total-Count",
        f"X-{settings.APP_NAME}-alert",
        f"X-{settings.APP_NAME}-error",
        f"X-{settings.APP_NAME}-params",
    ],
)

# --- 2. ERRORES ---
register_exception_handlers(app)

# --- 3. REGISTRAR RUTAS ---
app.include_router(partidas.router, prefix="/api", tags=["Partidas"])
app.include_router(partidas.legacy_router)

@app.get("/")
def read_root():
    return {
        "status": "online",
        "project": settings.APP_NAME,
        "docs": "Go to /docs to see the API"
    }
