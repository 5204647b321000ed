"""
Rutas de reportes agregados para el dashboard
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app_types.reportes import (
    CostoTratamiento,
    DistribucionTipoCancer,
    EdadPorCancer,
    InventarioMedicamento,
    ResumenKPI,
)
from services.reportes import (
    get_costos_tratamiento,
    get_distribucion_tipos_cancer,
    get_edad_por_cancer,
    get_inventario,
    get_resumen,
)
from utils.errores import error_base_datos
from utils.settings import get_session

router = APIRouter(prefix="/api/v1/reportes", tags=["Reportes"])


@router.get("/resumen", response_model=ResumenKPI)
def get_reporte_resumen(session: Session = Depends(get_session)) -> ResumenKPI:
    """
    Resumen KPI

    Pacientes activos (con algún tratamiento en curso), diagnósticos nuevos
    del mes, tratamientos en curso y altas del mes.
    """
    try:
        return get_resumen(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/cancer-tipos", response_model=List[DistribucionTipoCancer])
def get_reporte_cancer_tipos(
    session: Session = Depends(get_session),
) -> List[DistribucionTipoCancer]:
    """
    Distribución de diagnósticos por tipo de cáncer

    Lista de { name, value } ordenada por value descendente. Los tipos
    vacíos aparecen como "Sin especificar".
    """
    try:
        return get_distribucion_tipos_cancer(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/costos-tratamiento", response_model=List[CostoTratamiento])
def get_reporte_costos_tratamiento(
    session: Session = Depends(get_session),
) -> List[CostoTratamiento]:
    """
    Costos por tipo de tratamiento

    No hay datos de costo en la base: cost es el número de tratamientos de
    cada tipo (metrica = "conteo_tratamientos").
    """
    try:
        return get_costos_tratamiento(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/inventario", response_model=List[InventarioMedicamento])
def get_reporte_inventario(
    session: Session = Depends(get_session),
) -> List[InventarioMedicamento]:
    """
    Inventario por medicamento

    No hay tabla de existencias: stock es el número de prescripciones del
    medicamento (metrica = "conteo_prescripciones").
    """
    try:
        return get_inventario(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/edad-por-cancer", response_model=List[EdadPorCancer])
def get_reporte_edad_por_cancer(
    session: Session = Depends(get_session),
) -> List[EdadPorCancer]:
    """
    Distribución por grupos de edad y tipo de cáncer

    Una fila por grupo de edad (0-17, 18-35, 36-55, 56-75, 76+) con el
    conteo de diagnósticos por categoría (Mama, Prostata, Pulmon, Colon,
    Otro), su total y el porcentaje de cada categoría sobre el total del
    grupo. Los porcentajes son null en grupos sin diagnósticos.
    """
    try:
        return get_edad_por_cancer(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)
