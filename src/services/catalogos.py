"""
Servicio de catálogos para etiquetas y selects del dashboard

Los catálogos de texto libre (tipos de cáncer, estadios, tipos de
tratamiento) se obtienen con DISTINCT sobre las columnas clínicas; los
catálogos planos se leen con las tablas de SQLModel.
"""

from typing import List

from sqlalchemy import nulls_last
from sqlmodel import Session, select, text

from app_types.catalogos import (
    EstadoEnfermedad,
    InstitucionCatalogo,
    MedicamentoCatalogo,
    TipoCancer,
    TipoTratamiento,
    UnidadCatalogo,
)
from models.tables import Institucion, Medicamento, UnidadAtencion
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Columnas de texto libre expuestas como catálogo: alias -> (tabla, columna)
_CATALOGOS_TEXTO = {
    "tipo_cancer": ("diagnostico", "tipo_cancer"),
    "estado": ("diagnostico", "estadio_enfermedad"),
    "tipo_tratamiento": ("tratamiento", "tipo_tratamiento"),
}


def _valores_distintos(session: Session, alias: str) -> List[str]:
    """
    Obtener valores distintos, recortados y no vacíos de una columna

    Args:
        session: Sesión de base de datos
        alias: Clave de _CATALOGOS_TEXTO

    Returns:
        Valores ordenados ascendentemente
    """
    tabla, columna = _CATALOGOS_TEXTO[alias]
    # tabla y columna salen de la constante del módulo, nunca del request
    query = text(f"""
        SELECT DISTINCT TRIM({columna}) AS valor
        FROM {tabla}
        WHERE {columna} IS NOT NULL AND TRIM({columna}) <> ''
        ORDER BY 1 ASC
    """)
    rows = session.execute(query).fetchall()
    logger.info(f"Catálogo {alias}: {len(rows)} valores")
    return [row.valor for row in rows]


def get_tipos_cancer(session: Session) -> List[TipoCancer]:
    """Catálogo de tipos de cáncer registrados en diagnósticos"""
    return [TipoCancer(tipo_cancer=v) for v in _valores_distintos(session, "tipo_cancer")]


def get_estados_enfermedad(session: Session) -> List[EstadoEnfermedad]:
    """Catálogo de estadios de enfermedad registrados en diagnósticos"""
    return [EstadoEnfermedad(estado=v) for v in _valores_distintos(session, "estado")]


def get_tipos_tratamiento(session: Session) -> List[TipoTratamiento]:
    """Catálogo de tipos de tratamiento"""
    return [
        TipoTratamiento(tipo_tratamiento=v)
        for v in _valores_distintos(session, "tipo_tratamiento")
    ]


def get_medicamentos(session: Session) -> List[MedicamentoCatalogo]:
    """Catálogo de medicamentos ordenado por nombre; nombres nulos al final"""
    statement = select(Medicamento).order_by(
        nulls_last(Medicamento.nombre_medicamento), Medicamento.id_medicamento
    )
    return [
        MedicamentoCatalogo(
            id_medicamento=m.id_medicamento,
            nombre_medicamento=m.nombre_medicamento,
        )
        for m in session.exec(statement).all()
    ]


def get_unidades(session: Session) -> List[UnidadCatalogo]:
    """
    Catálogo de unidades de atención

    Incluye ciudad y nivel de complejidad de la institución (nulos si la
    unidad no tiene institución).
    """
    statement = (
        select(UnidadAtencion, Institucion)
        .join(
            Institucion,
            UnidadAtencion.id_institucion == Institucion.id_institucion,
            isouter=True,
        )
        .order_by(nulls_last(UnidadAtencion.nombre_unidad), UnidadAtencion.id_unidad)
    )

    unidades = []
    for unidad, institucion in session.exec(statement).all():
        unidades.append(
            UnidadCatalogo(
                id_unidad=unidad.id_unidad,
                nombre_unidad=unidad.nombre_unidad,
                ciudad=institucion.ciudad if institucion else None,
                nivel_complejidad=institucion.nivel_complejidad if institucion else None,
            )
        )
    return unidades


def get_instituciones(session: Session) -> List[InstitucionCatalogo]:
    statement = select(Institucion).order_by(
        nulls_last(Institucion.nombre_institucion), Institucion.id_institucion
    )
    return [
        InstitucionCatalogo(
            id_institucion=i.id_institucion,
            nombre_institucion=i.nombre_institucion,
            nivel_complejidad=i.nivel_complejidad,
            ciudad=i.ciudad,
        )
        for i in session.exec(statement).all()
    ]
