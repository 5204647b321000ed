"""
Pydantic types for dashboard reports
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class ResumenKPI(BaseModel):
    """
    Pydantic model for the dashboard KPI summary
    """

    pacientes_activos: int = Field(
        ..., description="Pacientes con al menos un tratamiento en curso"
    )
    nuevos_mes: int = Field(..., description="Diagnósticos del mes en curso")
    tratamientos_en_curso: int = Field(
        ..., description="Tratamientos iniciados sin fecha_fin o con fecha_fin >= hoy"
    )
    altas_mes: int = Field(
        ..., description="Tratamientos con fecha_fin en el mes en curso"
    )


class DistribucionTipoCancer(BaseModel):
    """
    Pydantic model for the cancer type distribution
    """

    name: str
    value: int


class CostoTratamiento(BaseModel):
    """
    Pydantic model for the cost per treatment type

    There is no cost data in the schema: cost is the number of treatments
    of each type, labelled by metrica.
    """

    name: str
    cost: float
    metrica: Literal["conteo_tratamientos"] = "conteo_tratamientos"


class InventarioMedicamento(BaseModel):
    """
    Pydantic model for the medication inventory

    There is no stock table in the schema: stock is the number of
    prescriptions referencing the medication, labelled by metrica.
    """

    name: Optional[str] = None
    stock: int
    metrica: Literal["conteo_prescripciones"] = "conteo_prescripciones"


class ConteosCancer(BaseModel):
    """
    Pydantic model for diagnosis counts per cancer category
    """

    Mama: int = 0
    Prostata: int = 0
    Pulmon: int = 0
    Colon: int = 0
    Otro: int = 0


class PorcentajesCancer(BaseModel):
    """
    Pydantic model for diagnosis percentages per cancer category

    All values are null when the age group has no diagnoses.
    """

    Mama: Optional[float] = None
    Prostata: Optional[float] = None
    Pulmon: Optional[float] = None
    Colon: Optional[float] = None
    Otro: Optional[float] = None


class EdadPorCancer(BaseModel):
    """
    Pydantic model for one age group row of the age x cancer type report
    """

    grupo: str
    total: int
    conteos: ConteosCancer
    porcentajes: PorcentajesCancer
