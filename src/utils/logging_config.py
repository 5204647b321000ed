"""
Configuración del sistema de logging de la aplicación

Gestiona el logging a consola y archivo con formato estandarizado.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

FORMATO_POR_DEFECTO = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = "logs",
    format_string: Optional[str] = None,
) -> None:
    """
    Configurar sistema de logging para toda la aplicación

    Args:
        log_level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directorio para app.log; None desactiva el log a archivo
        format_string: Formato opcional personalizado
    """
    formatter = logging.Formatter(format_string or FORMATO_POR_DEFECTO)

    # Logger raíz
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Eliminar handlers existentes
    root_logger.handlers.clear()

    # Handler para consola
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Log general de la aplicación
    if log_dir:
        carpeta_logs = Path(log_dir)
        carpeta_logs.mkdir(parents=True, exist_ok=True)
        app_file_handler = logging.FileHandler(carpeta_logs / "app.log")
        app_file_handler.setLevel(logging.DEBUG)
        app_file_handler.setFormatter(formatter)
        root_logger.addHandler(app_file_handler)

    # El SQL de cada consulta solo interesa en DEBUG
    if root_logger.level > logging.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Obtener instancia de logger para un módulo

    Args:
        name: Nombre del logger (típicamente __name__)

    Returns:
        Instancia de logger configurada
    """
    return logging.getLogger(name)
