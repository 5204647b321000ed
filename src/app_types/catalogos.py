"""
Pydantic types for catalogs
"""

from typing import Optional

from pydantic import BaseModel


class TipoCancer(BaseModel):
    """Tipo de cáncer registrado en diagnósticos"""

    tipo_cancer: str


class EstadoEnfermedad(BaseModel):
    """Estadio de enfermedad registrado en diagnósticos"""

    estado: str


class TipoTratamiento(BaseModel):
    """Tipo de tratamiento registrado"""

    tipo_tratamiento: str


class MedicamentoCatalogo(BaseModel):
    """Medicamento del catálogo; el nombre puede ser nulo"""

    id_medicamento: int
    nombre_medicamento: Optional[str] = None


class UnidadCatalogo(BaseModel):
    """
    Pydantic model for a care unit with its institution's city and level
    """

    id_unidad: int
    nombre_unidad: Optional[str] = None
    ciudad: Optional[str] = None
    nivel_complejidad: Optional[str] = None


class InstitucionCatalogo(BaseModel):
    """Institución de salud"""

    id_institucion: int
    nombre_institucion: Optional[str] = None
    nivel_complejidad: Optional[str] = None
    ciudad: Optional[str] = None
