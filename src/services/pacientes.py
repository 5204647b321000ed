"""
Servicio de consultas de pacientes y diagnósticos

Cada función ejecuta una única consulta SQL parametrizada y convierte las
filas a modelos Pydantic.
"""

from typing import List, Optional

from sqlmodel import Session, text

from app_types.pacientes import (
    DiagnosticoPaciente,
    InstitucionPaciente,
    ListadoPacientes,
    PacienteDetalle,
    PacienteResumen,
)
from services.normalizacion import parse_fecha, parse_int, parse_texto
from utils.logging_config import get_logger

logger = get_logger(__name__)


def listar_pacientes(session: Session, limite: int = 20) -> ListadoPacientes:
    """
    Listar una muestra de tamaño fijo de pacientes

    No hay paginación: se devuelven los primeros `limite` pacientes por id.
    El total se calcula con una función de ventana antes del LIMIT, por lo
    que refleja el número real de pacientes.

    Args:
        session: Sesión de base de datos
        limite: Número máximo de pacientes devueltos

    Returns:
        ListadoPacientes con items, page, size y total
    """
    query = text("""
        SELECT
            id_paciente,
            primer_nombre,
            primer_apellido,
            segundo_apellido,
            sexo,
            fecha_nacimiento,
            tipo_seguridad_social,
            correo_electronico,
            celular,
            municipio,
            COUNT(*) OVER () AS total
        FROM paciente
        ORDER BY id_paciente
        LIMIT :limite
    """)

    rows = session.execute(query, {"limite": limite}).fetchall()

    items = [
        PacienteResumen(
            id_paciente=parse_int(row.id_paciente),
            primer_nombre=parse_texto(row.primer_nombre),
            primer_apellido=parse_texto(row.primer_apellido),
            segundo_apellido=parse_texto(row.segundo_apellido),
            sexo=parse_texto(row.sexo),
            fecha_nacimiento=parse_fecha(row.fecha_nacimiento),
            tipo_seguridad_social=parse_texto(row.tipo_seguridad_social),
            correo_electronico=parse_texto(row.correo_electronico),
            celular=parse_texto(row.celular),
            municipio=parse_texto(row.municipio),
            # La base no tiene columna de foto
            foto_url=None,
        )
        for row in rows
    ]
    total = parse_int(rows[0].total, 0) if rows else 0
    logger.info(f"Listado de pacientes: {len(items)} de {total}")

    return ListadoPacientes(items=items, page=1, size=len(items), total=total)


def get_paciente(session: Session, id_paciente: int) -> Optional[PacienteDetalle]:
    """
    Obtener el detalle de un paciente con su institución

    La institución no es una clave foránea del paciente: se toma de la
    atención más reciente (mayor id_atencion) de cualquiera de sus
    tratamientos, recorriendo diagnóstico → tratamiento → atención →
    unidad → institución. Si no hay ninguna, institucion es None.

    Args:
        session: Sesión de base de datos
        id_paciente: Identificador del paciente

    Returns:
        PacienteDetalle o None si el paciente no existe
    """
    query = text("""
        SELECT
            p.id_paciente,
            p.primer_nombre,
            p.segundo_nombre,
            p.primer_apellido,
            p.segundo_apellido,
            p.sexo,
            p.fecha_nacimiento,
            p.tipo_seguridad_social,
            p.correo_electronico,
            p.telefono_fijo,
            p.celular,
            p.direccion,
            p.municipio,
            p.departamento,
            p.pais,
            p.tipo_sangre,
            ins.id_institucion,
            ins.nombre_institucion,
            ins.nivel_complejidad,
            ins.ciudad
        FROM paciente p
        LEFT JOIN institucion ins ON ins.id_institucion = (
            SELECT u.id_institucion
            FROM diagnostico d
            JOIN tratamiento t     ON t.id_diagnostico = d.id_diagnostico
            JOIN atencion a        ON a.id_tratamiento = t.id_tratamiento
            JOIN unidad_atencion u ON u.id_unidad = a.id_unidad
            WHERE d.id_paciente = p.id_paciente
              AND u.id_institucion IS NOT NULL
            ORDER BY a.id_atencion DESC
            LIMIT 1
        )
        WHERE p.id_paciente = :id
        LIMIT 1
    """)

    row = session.execute(query, {"id": id_paciente}).fetchone()
    if row is None:
        logger.info(f"Paciente {id_paciente} no encontrado")
        return None

    institucion = None
    if row.id_institucion is not None:
        institucion = InstitucionPaciente(
            id_institucion=parse_int(row.id_institucion),
            nombre_institucion=parse_texto(row.nombre_institucion),
            nivel_complejidad=parse_texto(row.nivel_complejidad),
            ciudad=parse_texto(row.ciudad),
        )

    return PacienteDetalle(
        id_paciente=parse_int(row.id_paciente),
        primer_nombre=parse_texto(row.primer_nombre),
        segundo_nombre=parse_texto(row.segundo_nombre),
        primer_apellido=parse_texto(row.primer_apellido),
        segundo_apellido=parse_texto(row.segundo_apellido),
        sexo=parse_texto(row.sexo),
        fecha_nacimiento=parse_fecha(row.fecha_nacimiento),
        tipo_seguridad_social=parse_texto(row.tipo_seguridad_social),
        correo_electronico=parse_texto(row.correo_electronico),
        telefono_fijo=parse_texto(row.telefono_fijo),
        celular=parse_texto(row.celular),
        direccion=parse_texto(row.direccion),
        municipio=parse_texto(row.municipio),
        departamento=parse_texto(row.departamento),
        pais=parse_texto(row.pais),
        tipo_sangre=parse_texto(row.tipo_sangre),
        foto_url=None,
        institucion=institucion,
    )


def listar_diagnosticos(session: Session, id_paciente: int) -> List[DiagnosticoPaciente]:
    """
    Listar los diagnósticos de un paciente

    Ordenados por fecha de diagnóstico descendente (nulos al final) y por
    id ascendente como desempate.
    """
    query = text("""
        SELECT
            d.id_diagnostico,
            d.tipo_cancer,
            d.estadio_enfermedad,
            d.fecha_diagnostico,
            d.observaciones
        FROM diagnostico d
        WHERE d.id_paciente = :id
        ORDER BY d.fecha_diagnostico DESC NULLS LAST, d.id_diagnostico
    """)

    rows = session.execute(query, {"id": id_paciente}).fetchall()
    logger.info(f"Paciente {id_paciente}: {len(rows)} diagnósticos")

    return [
        DiagnosticoPaciente(
            id_diagnostico=parse_int(row.id_diagnostico),
            tipo_cancer=parse_texto(row.tipo_cancer),
            estadio_enfermedad=parse_texto(row.estadio_enfermedad),
            fecha_diagnostico=parse_fecha(row.fecha_diagnostico),
            observaciones=parse_texto(row.observaciones),
            # Sin columna en el esquema
            medico_responsable=None,
            estado=None,
        )
        for row in rows
    ]
