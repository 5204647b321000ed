from datetime import date as date_type
from typing import List, Optional

from pydantic import BaseModel


class PacienteResumen(BaseModel):
    """
    Pydantic model for an item of the patient listing
    """

    id_paciente: int
    primer_nombre: Optional[str]
    primer_apellido: Optional[str]
    segundo_apellido: Optional[str]
    sexo: Optional[str]
    fecha_nacimiento: Optional[date_type]
    tipo_seguridad_social: Optional[str]
    correo_electronico: Optional[str]
    celular: Optional[str]
    municipio: Optional[str]
    foto_url: Optional[str] = None


class ListadoPacientes(BaseModel):
    """
    Pydantic model for the patient listing envelope

    The listing is a fixed-size sample: page is always 1, size is the number
    of returned items and total the number of patients in the database.
    """

    items: List[PacienteResumen]
    page: int
    size: int
    total: int


class InstitucionPaciente(BaseModel):
    """
    Pydantic model for the institution linked to a patient
    """

    id_institucion: int
    nombre_institucion: Optional[str]
    nivel_complejidad: Optional[str] = None
    ciudad: Optional[str] = None


class PacienteDetalle(BaseModel):
    """
    Pydantic model for patient detail response
    """

    id_paciente: int
    primer_nombre: Optional[str]
    segundo_nombre: Optional[str]
    primer_apellido: Optional[str]
    segundo_apellido: Optional[str]
    sexo: Optional[str]
    fecha_nacimiento: Optional[date_type]
    tipo_seguridad_social: Optional[str]
    correo_electronico: Optional[str]
    telefono_fijo: Optional[str]
    celular: Optional[str]
    direccion: Optional[str]
    municipio: Optional[str]
    departamento: Optional[str]
    pais: Optional[str]
    tipo_sangre: Optional[str]
    foto_url: Optional[str] = None
    institucion: Optional[InstitucionPaciente] = None


class DiagnosticoPaciente(BaseModel):
    """
    Pydantic model for a patient's diagnosis

    medico_responsable and estado have no column in the schema and are
    always null.
    """

    id_diagnostico: int
    tipo_cancer: Optional[str]
    estadio_enfermedad: Optional[str]
    fecha_diagnostico: Optional[date_type]
    observaciones: Optional[str] = None
    medico_responsable: Optional[str] = None
    estado: Optional[str] = None
