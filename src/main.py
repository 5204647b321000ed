"""
API de Registros Oncológicos
FastAPI application de solo lectura: pacientes, diagnósticos, tratamientos,
catálogos y reportes agregados para el dashboard
"""

import time
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, text

from app_types.monitoring import HealthStatus
from routes import catalogos_router, pacientes_router, reportes_router, tratamientos_router
from utils.errores import JSONUTF8Response, registrar_manejadores
from utils.logging_config import get_logger, setup_logging
from utils.settings import crear_engine, get_session, get_settings

VERSION = "1.0.0"

settings = get_settings()

# Configurar sistema de logging
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)

# Registrar tiempo de inicio para cálculo de uptime
startup_time = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Crear el motor de base de datos al arrancar y liberarlo al detenerse"""
    logger.info("Iniciando API...")
    app.state.engine = crear_engine(settings)
    logger.info(
        f"Motor de base de datos creado para {settings.db_host}:{settings.db_port}/{settings.db_name}"
    )
    yield
    app.state.engine.dispose()
    logger.info("API detenida")


# ============================================================================
# CONFIGURACIÓN DE LA APLICACIÓN
# ============================================================================

app = FastAPI(
    title="API de Registros Oncológicos",
    description="API de solo lectura con pacientes, diagnósticos, tratamientos y reportes del dashboard oncológico",
    version=VERSION,
    lifespan=lifespan,
    default_response_class=JSONUTF8Response,
)

registrar_manejadores(app)

# Incluir routers
app.include_router(pacientes_router)
app.include_router(tratamientos_router)
app.include_router(reportes_router)
app.include_router(catalogos_router)


@app.get("/", include_in_schema=False)
def raiz() -> RedirectResponse:
    """Redirigir a la documentación interactiva"""
    return RedirectResponse(url="/docs", status_code=302)


@app.get("/health", response_model=HealthStatus)
def health_check(session: Session = Depends(get_session)) -> HealthStatus:
    """
    Endpoint de verificación de salud del sistema

    Verifica la conexión a la base de datos.
    """
    db_connected = False
    try:
        session.execute(text("SELECT 1"))
        db_connected = True
    except SQLAlchemyError as e:
        logger.error(f"Falló verificación de conexión a base de datos: {e}")

    uptime = time.time() - startup_time

    return HealthStatus(
        status="healthy" if db_connected else "unhealthy",
        database_connected=db_connected,
        timestamp=datetime.now(),
        uptime_seconds=round(uptime, 2),
        version=VERSION,
    )


# ============================================================================
# EJECUTAR SERVIDOR
# ============================================================================

if __name__ == "__main__":
    # Ejecutar servidor con uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=False,  # Desactivar en producción
    )
