"""
Rutas de pacientes

Este módulo contiene los endpoints para:
- Listado de pacientes (muestra de tamaño fijo)
- Detalle de paciente con su institución
- Diagnósticos de un paciente
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app_types.pacientes import DiagnosticoPaciente, ListadoPacientes, PacienteDetalle
from services.pacientes import get_paciente, listar_diagnosticos, listar_pacientes
from utils.errores import error_base_datos
from utils.settings import get_session, get_settings

router = APIRouter(prefix="/api/v1/pacientes", tags=["Pacientes"])


@router.get("", response_model=ListadoPacientes)
def get_pacientes(session: Session = Depends(get_session)) -> ListadoPacientes:
    """
    Listar pacientes

    Devuelve como máximo 20 pacientes ordenados por id. No hay paginación:
    page es siempre 1, size el número de items devueltos y total el número
    de pacientes registrados.
    """
    try:
        return listar_pacientes(session, limite=get_settings().limite_pacientes)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/{id}", response_model=PacienteDetalle)
def get_detalle_paciente(
    id: int = Path(..., gt=0, description="ID del paciente"),
    session: Session = Depends(get_session),
) -> PacienteDetalle:
    """
    Obtener detalle de paciente

    Incluye la institución de la atención más reciente del paciente, o null
    si no tiene atenciones registradas.
    """
    try:
        paciente = get_paciente(session, id)
    except SQLAlchemyError as e:
        raise error_base_datos(e)

    if paciente is None:
        raise HTTPException(status_code=404, detail="Paciente no encontrado")
    return paciente


@router.get("/{id}/diagnosticos", response_model=List[DiagnosticoPaciente])
def get_diagnosticos_paciente(
    id: int = Path(..., gt=0, description="ID del paciente"),
    session: Session = Depends(get_session),
) -> List[DiagnosticoPaciente]:
    """
    Listar diagnósticos de un paciente

    Ordenados por fecha de diagnóstico descendente. medico_responsable y
    estado se devuelven siempre como null.
    """
    try:
        return listar_diagnosticos(session, id)
    except SQLAlchemyError as e:
        raise error_base_datos(e)
