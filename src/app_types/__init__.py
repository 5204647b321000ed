"""
Types module for API request/response models
"""

from app_types.catalogos import (
    EstadoEnfermedad,
    InstitucionCatalogo,
    MedicamentoCatalogo,
    TipoCancer,
    TipoTratamiento,
    UnidadCatalogo,
)
from app_types.errores import DetalleError, ErrorResponse
from app_types.monitoring import HealthStatus
from app_types.pacientes import (
    DiagnosticoPaciente,
    InstitucionPaciente,
    ListadoPacientes,
    PacienteDetalle,
    PacienteResumen,
)
from app_types.reportes import (
    ConteosCancer,
    CostoTratamiento,
    DistribucionTipoCancer,
    EdadPorCancer,
    InventarioMedicamento,
    PorcentajesCancer,
    ResumenKPI,
)
from app_types.tratamientos import (
    ActividadTratamiento,
    PrescripcionTratamiento,
    TratamientoDiagnostico,
    UnidadTratamiento,
)

__all__ = [
    # Pacientes
    "PacienteResumen",
    "ListadoPacientes",
    "PacienteDetalle",
    "InstitucionPaciente",
    "DiagnosticoPaciente",
    # Tratamientos
    "TratamientoDiagnostico",
    "UnidadTratamiento",
    "PrescripcionTratamiento",
    "ActividadTratamiento",
    # Catálogos
    "TipoCancer",
    "EstadoEnfermedad",
    "TipoTratamiento",
    "MedicamentoCatalogo",
    "UnidadCatalogo",
    "InstitucionCatalogo",
    # Reportes
    "ResumenKPI",
    "DistribucionTipoCancer",
    "CostoTratamiento",
    "InventarioMedicamento",
    "ConteosCancer",
    "PorcentajesCancer",
    "EdadPorCancer",
    # Errores y monitoreo
    "DetalleError",
    "ErrorResponse",
    "HealthStatus",
]
