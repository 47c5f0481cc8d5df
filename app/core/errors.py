"""
Errores de la API y su traducción a respuestas `application/problem+json`.

Los errores de validación y de contrato de identidad se lanzan durante el
manejo de la petición y se convierten aquí en respuestas 4xx con el nombre
de la entidad y un código de error (`idexists`, `idnull`, ...). Los fallos
de persistencia no se capturan: llegan a FastAPI como 500.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import settings

logger = logging.getLogger(__name__)

PROBLEM_BASE_URL = "https://www.jhipster.tech/problem"
PROBLEM_CONTENT_TYPE = "application/problem+json"

# Los errores del cuerpo se atribuyen a la entidad, como en bean validation
BODY_OBJECT_NAME = "partida"

# Traducción de los tipos de error de pydantic a las restricciones de bean validation
_CONSTRAINTS = {
    "missing": "NotNull",
    "none_required": "NotNull",
    "greater_than_equal": "Min",
    "less_than_equal": "Max",
    "int_parsing": "TypeMismatch",
    "int_type": "TypeMismatch",
    "string_type": "TypeMismatch",
}


class ErrorAPI(Exception):
    """Base de los errores que la API devuelve como problem+json."""

    status = 400
    title = "Bad Request"
    problem_type = f"{PROBLEM_BASE_URL}/problem-with-message"

    def __init__(self, message: str, entity_name: str, error_key: str):
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(message)


class BadRequestAlertException(ErrorAPI):
    """Violación del contrato de la petición (id, parámetros obligatorios...)."""

    def __init__(self, message: str, entity_name: str, error_key: str):
        super().__init__(message, entity_name, error_key)
        self.title = message


class NotFoundException(ErrorAPI):
    status = 404
    title = "Not Found"
    problem_type = "about:blank"

    def __init__(self, entity_name: str, error_key: str = "notfound"):
        super().__init__("Entity not found", entity_name, error_key)


def error_headers(error_key: str, entity_name: str) -> dict:
    return {
        f"X-{settings.APP_NAME}-error": f"error.{error_key}",
        f"X-{settings.APP_NAME}-params": entity_name,
    }


def problem_response(status: int, body: dict, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content=body,
        headers=headers,
        media_type=PROBLEM_CONTENT_TYPE,
    )


async def error_api_handler(request: Request, exc: ErrorAPI):
    logger.debug("%s %s -> %s (%s)", request.method, request.url.path, exc.status, exc.error_key)
    body = {
        "type": exc.problem_type,
        "title": exc.title,
        "status": exc.status,
        "entityName": exc.entity_name,
        "errorKey": exc.error_key,
        "message": f"error.{exc.error_key}",
        "params": exc.entity_name,
        "path": request.url.path,
    }
    return problem_response(exc.status, body, error_headers(exc.error_key, exc.entity_name))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    field_errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        object_name = loc[0] if loc else "request"
        if object_name == "body":
            object_name = BODY_OBJECT_NAME
        field_errors.append({
            "objectName": object_name,
            "field": loc[-1] if loc else "",
            "message": _CONSTRAINTS.get(err.get("type"), err.get("type")),
        })
    logger.debug("%s %s -> 400 validación: %s", request.method, request.url.path, field_errors)
    body = {
        "type": f"{PROBLEM_BASE_URL}/constraint-violation",
        "title": "Method argument not valid",
        "status": 400,
        "message": "error.validation",
        "path": request.url.path,
        "fieldErrors": field_errors,
    }
    return problem_response(400, body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ErrorAPI, error_api_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
