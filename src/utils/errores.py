"""
Manejo de errores de la API

Toda respuesta de error usa el sobre
{"error": {"status", "title", "detail", "path"}}.
El detalle de los errores 5xx solo se muestra si MOSTRAR_DETALLES_ERROR
está activo.
"""

from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app_types.errores import DetalleError, ErrorResponse
from utils.logging_config import get_logger
from utils.settings import get_settings

logger = get_logger(__name__)


class JSONUTF8Response(JSONResponse):
    """JSONResponse con charset explícito en el Content-Type"""

    media_type = "application/json; charset=utf-8"


def _titulo(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def respuesta_error(
    request: Request, status_code: int, detail: Optional[Any] = None
) -> JSONUTF8Response:
    """
    Construir la respuesta de error con el sobre estándar

    Args:
        request: Request que originó el error
        status_code: Código HTTP
        detail: Mensaje del error; se suprime en 5xx salvo configuración

    Returns:
        JSONUTF8Response con el sobre de error
    """
    if status_code >= 500 and not get_settings().mostrar_detalles_error:
        detail = None

    cuerpo = ErrorResponse(
        error=DetalleError(
            status=status_code,
            title=_titulo(status_code),
            detail=None if detail is None else str(detail),
            path=request.url.path,
        )
    )
    return JSONUTF8Response(status_code=status_code, content=cuerpo.model_dump())


def error_base_datos(e: SQLAlchemyError) -> HTTPException:
    """
    Convertir un error de base de datos en HTTPException 500

    Un OperationalError indica que no se pudo abrir o mantener la conexión:
    es fatal para el request en curso y no se reintenta.
    """
    if isinstance(e, OperationalError):
        logger.critical(f"Error de conexión a base de datos: {e}")
    else:
        logger.error(f"Error ejecutando consulta SQL: {e}")
    return HTTPException(
        status_code=500, detail=f"Error ejecutando consulta SQL: {str(e)}"
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONUTF8Response:
    """Errores HTTP lanzados por las rutas (404, 500, ...)"""
    return respuesta_error(request, exc.status_code, exc.detail)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONUTF8Response:
    """Parámetros de ruta ausentes o no numéricos: 400"""
    mensajes = []
    for error in exc.errors():
        campo = ".".join(str(parte) for parte in error.get("loc", ()) if parte != "path")
        mensajes.append(f"{campo}: {error.get('msg')}")
    logger.warning(f"Parámetros inválidos en {request.url.path}: {mensajes}")
    return respuesta_error(request, 400, "; ".join(mensajes))


async def unhandled_exception_handler(
    request: Request, exc: Exception
) -> JSONUTF8Response:
    """Cualquier excepción no controlada: 500"""
    logger.exception(f"Error no controlado en {request.url.path}: {exc}")
    return respuesta_error(request, 500, str(exc))


def registrar_manejadores(app: FastAPI) -> None:
    """Registrar los manejadores de error en la aplicación"""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
