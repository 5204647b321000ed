"""
Models package.
Importa todas las tablas para registrarlas en SQLModel.metadata
"""

from models.tables import (
    ActividadTratamiento,
    Atencion,
    Diagnostico,
    Institucion,
    Medicamento,
    Paciente,
    Prescripcion,
    Tratamiento,
    UnidadAtencion,
)

__all__ = [
    "Paciente",
    "Diagnostico",
    "Tratamiento",
    "Atencion",
    "UnidadAtencion",
    "Institucion",
    "Medicamento",
    "Prescripcion",
    "ActividadTratamiento",
]
