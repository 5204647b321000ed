"""
Rutas de diagnósticos y tratamientos

Este módulo contiene los endpoints para:
- Tratamientos de un diagnóstico
- Prescripciones y actividades de un tratamiento
"""

from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app_types.tratamientos import (
    ActividadTratamiento,
    PrescripcionTratamiento,
    TratamientoDiagnostico,
)
from services.tratamientos import (
    listar_actividades,
    listar_prescripciones,
    listar_tratamientos,
)
from utils.errores import error_base_datos
from utils.settings import get_session

router = APIRouter(prefix="/api/v1", tags=["Tratamientos"])


@router.get(
    "/diagnosticos/{id}/tratamientos", response_model=List[TratamientoDiagnostico]
)
def get_tratamientos_diagnostico(
    id: int = Path(..., gt=0, description="ID del diagnóstico"),
    session: Session = Depends(get_session),
) -> List[TratamientoDiagnostico]:
    """
    Listar tratamientos asociados a un diagnóstico

    La unidad de atención y las observaciones provienen de las atenciones
    del tratamiento; si hay varias se conserva una sola.
    """
    try:
        return listar_tratamientos(session, id)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get(
    "/tratamientos/{id}/prescripciones",
    response_model=List[PrescripcionTratamiento],
)
def get_prescripciones_tratamiento(
    id: int = Path(..., gt=0, description="ID del tratamiento"),
    session: Session = Depends(get_session),
) -> List[PrescripcionTratamiento]:
    """Listar prescripciones asociadas a un tratamiento"""
    try:
        return listar_prescripciones(session, id)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get(
    "/tratamientos/{id}/actividades", response_model=List[ActividadTratamiento]
)
def get_actividades_tratamiento(
    id: int = Path(..., gt=0, description="ID del tratamiento"),
    session: Session = Depends(get_session),
) -> List[ActividadTratamiento]:
    """
    Listar actividades asociadas a un tratamiento

    Fechas en formato YYYY-MM-DD; archivo es el enlace al archivo adjunto
    o null.
    """
    try:
        return listar_actividades(session, id)
    except SQLAlchemyError as e:
        raise error_base_datos(e)
