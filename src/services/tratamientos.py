"""
Servicio de consultas de tratamientos, prescripciones y actividades
"""

from typing import List

from sqlmodel import Session, text

from app_types.tratamientos import (
    ActividadTratamiento,
    PrescripcionTratamiento,
    TratamientoDiagnostico,
    UnidadTratamiento,
)
from services.normalizacion import parse_fecha, parse_int, parse_texto
from utils.logging_config import get_logger

logger = get_logger(__name__)


def listar_tratamientos(
    session: Session, id_diagnostico: int
) -> List[TratamientoDiagnostico]:
    """
    Listar los tratamientos de un diagnóstico

    El tratamiento no guarda unidad ni observaciones: vienen de sus
    atenciones. Para no duplicar tratamientos con varias atenciones se
    agrega con MAX, por lo que sobrevive una sola unidad (la de mayor id)
    y una sola observación.

    Args:
        session: Sesión de base de datos
        id_diagnostico: Identificador del diagnóstico

    Returns:
        Lista de TratamientoDiagnostico ordenada por id_tratamiento
    """
    query = text("""
        SELECT
            base.id_tratamiento,
            base.tipo_tratamiento,
            base.fecha_inicio,
            base.fecha_fin,
            base.resultado_clinico_final,
            base.observaciones,
            base.id_unidad,
            u.nombre_unidad
        FROM (
            SELECT
                t.id_tratamiento,
                t.tipo_tratamiento,
                t.fecha_inicio,
                t.fecha_fin,
                t.resultado_clinico_final,
                MAX(a.observaciones) AS observaciones,
                MAX(a.id_unidad)     AS id_unidad
            FROM tratamiento t
            LEFT JOIN atencion a ON a.id_tratamiento = t.id_tratamiento
            WHERE t.id_diagnostico = :id
            GROUP BY
                t.id_tratamiento,
                t.tipo_tratamiento,
                t.fecha_inicio,
                t.fecha_fin,
                t.resultado_clinico_final
        ) base
        LEFT JOIN unidad_atencion u ON u.id_unidad = base.id_unidad
        ORDER BY base.id_tratamiento
    """)

    rows = session.execute(query, {"id": id_diagnostico}).fetchall()
    logger.info(f"Diagnóstico {id_diagnostico}: {len(rows)} tratamientos")

    tratamientos = []
    for row in rows:
        unidad = None
        if row.id_unidad is not None:
            unidad = UnidadTratamiento(
                id_unidad=parse_int(row.id_unidad),
                nombre_unidad=parse_texto(row.nombre_unidad),
            )

        tratamientos.append(
            TratamientoDiagnostico(
                id_tratamiento=parse_int(row.id_tratamiento),
                tipo_tratamiento=parse_texto(row.tipo_tratamiento),
                fecha_inicio=parse_fecha(row.fecha_inicio),
                fecha_fin=parse_fecha(row.fecha_fin),
                resultado_clinico_final=parse_texto(row.resultado_clinico_final),
                observaciones=parse_texto(row.observaciones),
                unidad_atencion=unidad,
            )
        )

    return tratamientos


def listar_prescripciones(
    session: Session, id_tratamiento: int
) -> List[PrescripcionTratamiento]:
    """
    Listar las prescripciones de un tratamiento

    Más recientes primero; el nombre del medicamento es nulo si la
    prescripción apunta a un medicamento inexistente.
    """
    query = text("""
        SELECT
            p.id_prescripcion,
            p.id_medicamento,
            m.nombre_medicamento,
            p.dosis,
            p.frecuencia,
            p.duracion_dias,
            p.fecha_prescripcion
        FROM prescripcion p
        LEFT JOIN medicamento m ON m.id_medicamento = p.id_medicamento
        WHERE p.id_tratamiento = :id
        ORDER BY p.fecha_prescripcion DESC NULLS LAST, p.id_prescripcion
    """)

    rows = session.execute(query, {"id": id_tratamiento}).fetchall()
    logger.info(f"Tratamiento {id_tratamiento}: {len(rows)} prescripciones")

    return [
        PrescripcionTratamiento(
            id_prescripcion=parse_int(row.id_prescripcion),
            id_medicamento=parse_int(row.id_medicamento),
            nombre_medicamento=parse_texto(row.nombre_medicamento),
            dosis=parse_texto(row.dosis),
            frecuencia=parse_texto(row.frecuencia),
            duracion_dias=parse_int(row.duracion_dias),
            fecha_prescripcion=parse_fecha(row.fecha_prescripcion),
        )
        for row in rows
    ]


def listar_actividades(
    session: Session, id_tratamiento: int
) -> List[ActividadTratamiento]:
    """
    Listar las actividades de un tratamiento

    Ordenadas por fecha descendente y luego por id descendente. La fecha se
    normaliza a fecha de calendario aunque la columna sea timestamp.
    """
    query = text("""
        SELECT
            a.id_actividad,
            a.tipo_actividad,
            a.fecha_actividad,
            a.nombre_procedimiento,
            a.id_unidad,
            a.medico_responsable,
            a.observaciones,
            a.resultado_clinico,
            a.enlace_archivo AS archivo
        FROM actividad_tratamiento a
        WHERE a.id_tratamiento = :id
        ORDER BY a.fecha_actividad DESC NULLS LAST, a.id_actividad DESC
    """)

    rows = session.execute(query, {"id": id_tratamiento}).fetchall()
    logger.info(f"Tratamiento {id_tratamiento}: {len(rows)} actividades")

    return [
        ActividadTratamiento(
            id_actividad=parse_int(row.id_actividad),
            tipo_actividad=parse_texto(row.tipo_actividad),
            fecha_actividad=parse_fecha(row.fecha_actividad),
            nombre_procedimiento=parse_texto(row.nombre_procedimiento),
            id_unidad=parse_int(row.id_unidad),
            medico_responsable=parse_texto(row.medico_responsable),
            observaciones=parse_texto(row.observaciones),
            resultado_clinico=parse_texto(row.resultado_clinico),
            archivo=parse_texto(row.archivo),
        )
        for row in rows
    ]
