"""
Modelos de base de datos del registro oncológico

Declaran el esquema existente (la API no lo crea ni lo migra):
- Paciente, Diagnostico, Tratamiento: historia clínica
- Atencion: encuentro que vincula un tratamiento con una unidad de atención
- UnidadAtencion, Institucion, Medicamento: catálogos planos
- Prescripcion, ActividadTratamiento: detalle de cada tratamiento
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


# ============================================================================
# CATÁLOGOS
# ============================================================================
class Institucion(SQLModel, table=True):
    """Institución de salud (hospital, clínica)"""

    id_institucion: Optional[int] = Field(default=None, primary_key=True)
    nombre_institucion: Optional[str] = Field(default=None)
    nivel_complejidad: Optional[str] = Field(default=None)
    ciudad: Optional[str] = Field(default=None)


class UnidadAtencion(SQLModel, table=True):
    """Servicio clínico dentro de una institución"""

    __tablename__ = "unidad_atencion"  # type: ignore[assignment]

    id_unidad: Optional[int] = Field(default=None, primary_key=True)
    nombre_unidad: Optional[str] = Field(default=None)
    id_institucion: Optional[int] = Field(
        default=None, foreign_key="institucion.id_institucion"
    )


class Medicamento(SQLModel, table=True):
    """Medicamento prescribible"""

    id_medicamento: Optional[int] = Field(default=None, primary_key=True)
    nombre_medicamento: Optional[str] = Field(default=None)


# ============================================================================
# HISTORIA CLÍNICA
# ============================================================================
class Paciente(SQLModel, table=True):
    """
    Modelo de la tabla paciente

    Datos de identificación y demográficos. La institución de origen no es
    una clave foránea: se deriva de las atenciones de sus tratamientos.
    """

    id_paciente: Optional[int] = Field(default=None, primary_key=True)

    # Identificación
    primer_nombre: str
    segundo_nombre: Optional[str] = Field(default=None)
    primer_apellido: str
    segundo_apellido: Optional[str] = Field(default=None)

    # Datos demográficos
    sexo: Optional[str] = Field(default=None)
    fecha_nacimiento: Optional[date] = Field(default=None)
    tipo_sangre: Optional[str] = Field(default=None)
    tipo_seguridad_social: Optional[str] = Field(default=None)

    # Contacto
    correo_electronico: Optional[str] = Field(default=None)
    telefono_fijo: Optional[str] = Field(default=None)
    celular: Optional[str] = Field(default=None)
    direccion: Optional[str] = Field(default=None)
    municipio: Optional[str] = Field(default=None)
    departamento: Optional[str] = Field(default=None)
    pais: Optional[str] = Field(default=None)


class Diagnostico(SQLModel, table=True):
    """Diagnóstico oncológico; tipo_cancer es texto libre"""

    id_diagnostico: Optional[int] = Field(default=None, primary_key=True)
    id_paciente: int = Field(foreign_key="paciente.id_paciente")
    tipo_cancer: Optional[str] = Field(default=None)
    estadio_enfermedad: Optional[str] = Field(default=None)
    fecha_diagnostico: Optional[date] = Field(default=None)
    observaciones: Optional[str] = Field(default=None)


class Tratamiento(SQLModel, table=True):
    """Tratamiento de un diagnóstico; fecha_fin nula significa en curso"""

    id_tratamiento: Optional[int] = Field(default=None, primary_key=True)
    id_diagnostico: int = Field(foreign_key="diagnostico.id_diagnostico")
    tipo_tratamiento: Optional[str] = Field(default=None)
    fecha_inicio: Optional[date] = Field(default=None)
    fecha_fin: Optional[date] = Field(default=None)
    resultado_clinico_final: Optional[str] = Field(default=None)


class Atencion(SQLModel, table=True):
    """Encuentro de atención: vincula un tratamiento con una unidad"""

    id_atencion: Optional[int] = Field(default=None, primary_key=True)
    id_tratamiento: int = Field(foreign_key="tratamiento.id_tratamiento")
    id_unidad: Optional[int] = Field(
        default=None, foreign_key="unidad_atencion.id_unidad"
    )
    observaciones: Optional[str] = Field(default=None)


class Prescripcion(SQLModel, table=True):
    """Prescripción de un medicamento dentro de un tratamiento"""

    id_prescripcion: Optional[int] = Field(default=None, primary_key=True)
    id_tratamiento: int = Field(foreign_key="tratamiento.id_tratamiento")
    id_medicamento: Optional[int] = Field(
        default=None, foreign_key="medicamento.id_medicamento"
    )
    dosis: Optional[str] = Field(default=None)
    frecuencia: Optional[str] = Field(default=None)
    duracion_dias: Optional[int] = Field(default=None)
    fecha_prescripcion: Optional[date] = Field(default=None)


class ActividadTratamiento(SQLModel, table=True):
    """Actividad o procedimiento realizado durante un tratamiento"""

    __tablename__ = "actividad_tratamiento"  # type: ignore[assignment]

    id_actividad: Optional[int] = Field(default=None, primary_key=True)
    id_tratamiento: int = Field(foreign_key="tratamiento.id_tratamiento")
    tipo_actividad: Optional[str] = Field(default=None)
    fecha_actividad: Optional[date] = Field(default=None)
    nombre_procedimiento: Optional[str] = Field(default=None)
    id_unidad: Optional[int] = Field(default=None)
    medico_responsable: Optional[str] = Field(default=None)
    observaciones: Optional[str] = Field(default=None)
    resultado_clinico: Optional[str] = Field(default=None)
    enlace_archivo: Optional[str] = Field(default=None)
