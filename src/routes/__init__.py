"""
Routes package - contiene los routers de pacientes, tratamientos, reportes y catálogos
"""

from routes.catalogos import router as catalogos_router
from routes.pacientes import router as pacientes_router
from routes.reportes import router as reportes_router
from routes.tratamientos import router as tratamientos_router

__all__ = [
    "pacientes_router",
    "tratamientos_router",
    "reportes_router",
    "catalogos_router",
]
