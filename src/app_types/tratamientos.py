from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel


class UnidadTratamiento(BaseModel):
    """
    Pydantic model for the care unit attached to a treatment
    """

    id_unidad: int
    nombre_unidad: Optional[str]


class TratamientoDiagnostico(BaseModel):
    """
    Pydantic model for a treatment of a diagnosis

    unidad_atencion and observaciones come from the care encounters
    (atencion); when there are several, a single MAX value survives.
    """

    id_tratamiento: int
    tipo_tratamiento: Optional[str]
    fecha_inicio: Optional[date_type]
    fecha_fin: Optional[date_type] = None
    resultado_clinico_final: Optional[str] = None
    observaciones: Optional[str] = None
    unidad_atencion: Optional[UnidadTratamiento] = None


class PrescripcionTratamiento(BaseModel):
    """
    Pydantic model for a prescription of a treatment
    """

    id_prescripcion: int
    id_medicamento: Optional[int]
    nombre_medicamento: Optional[str]
    dosis: Optional[str]
    frecuencia: Optional[str]
    duracion_dias: Optional[int]
    fecha_prescripcion: Optional[date_type]


class ActividadTratamiento(BaseModel):
    """
    Pydantic model for an activity of a treatment
    """

    id_actividad: int
    tipo_actividad: Optional[str] = None
    fecha_actividad: Optional[date_type] = None
    nombre_procedimiento: Optional[str] = None
    id_unidad: Optional[int] = None
    medico_responsable: Optional[str] = None
    observaciones: Optional[str] = None
    resultado_clinico: Optional[str] = None
    archivo: Optional[str] = None
