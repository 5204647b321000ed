"""
Rutas de catálogos para etiquetas y selects
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app_types.catalogos import (
    EstadoEnfermedad,
    InstitucionCatalogo,
    MedicamentoCatalogo,
    TipoCancer,
    TipoTratamiento,
    UnidadCatalogo,
)
from services.catalogos import (
    get_estados_enfermedad,
    get_instituciones,
    get_medicamentos,
    get_tipos_cancer,
    get_tipos_tratamiento,
    get_unidades,
)
from utils.errores import error_base_datos
from utils.settings import get_session

router = APIRouter(prefix="/api/v1", tags=["Catálogos"])


@router.get("/catalogos/tipos-cancer", response_model=List[TipoCancer])
def get_catalogo_tipos_cancer(
    session: Session = Depends(get_session),
) -> List[TipoCancer]:
    """Catálogo de tipos de cáncer (distinct desde diagnósticos)"""
    try:
        return get_tipos_cancer(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/catalogos/estados-enfermedad", response_model=List[EstadoEnfermedad])
def get_catalogo_estados(
    session: Session = Depends(get_session),
) -> List[EstadoEnfermedad]:
    """Catálogo de estadios de enfermedad"""
    try:
        return get_estados_enfermedad(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/catalogos/tipos-tratamiento", response_model=List[TipoTratamiento])
def get_catalogo_tipos_tratamiento(
    session: Session = Depends(get_session),
) -> List[TipoTratamiento]:
    """Catálogo de tipos de tratamiento"""
    try:
        return get_tipos_tratamiento(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/medicamentos", response_model=List[MedicamentoCatalogo])
def get_catalogo_medicamentos(
    session: Session = Depends(get_session),
) -> List[MedicamentoCatalogo]:
    try:
        return get_medicamentos(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/unidades", response_model=List[UnidadCatalogo])
def get_catalogo_unidades(
    session: Session = Depends(get_session),
) -> List[UnidadCatalogo]:
    """Catálogo de unidades de atención con ciudad y nivel de su institución"""
    try:
        return get_unidades(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)


@router.get("/instituciones", response_model=List[InstitucionCatalogo])
def get_catalogo_instituciones(
    session: Session = Depends(get_session),
) -> List[InstitucionCatalogo]:
    try:
        return get_instituciones(session)
    except SQLAlchemyError as e:
        raise error_base_datos(e)
