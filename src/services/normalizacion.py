"""
Normalización de filas de la base de datos

Convierte los valores crudos que devuelve el driver (int, Decimal, str,
date, datetime o None) a los tipos de los modelos de respuesta.
"""

import unicodedata
from datetime import date as date_type
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional


def parse_int(valor: Any, defecto: Optional[int] = None) -> Optional[int]:
    """
    Parsear entero desde varios formatos

    Args:
        valor: Valor crudo de la columna
        defecto: Valor devuelto cuando el dato es nulo o no numérico

    Returns:
        Entero o el valor por defecto
    """
    if valor is None:
        return defecto
    if isinstance(valor, bool):
        return int(valor)
    if isinstance(valor, int):
        return valor
    try:
        if isinstance(valor, (float, Decimal)):
            return int(valor)
        return int(str(valor).strip())
    except (ValueError, OverflowError):
        # NaN, infinito o texto no numérico
        return defecto


def parse_texto(valor: Any) -> Optional[str]:
    """Parsear texto anulable"""
    if valor is None:
        return None
    return str(valor)


def parse_fecha(valor: Any) -> Optional[date_type]:
    """
    Parsear fecha desde varios formatos (date, datetime, string ISO)

    Las fechas no interpretables se devuelven como None.
    """
    if valor is None:
        return None
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date_type):
        return valor
    texto = str(valor).strip()
    if not texto:
        return None
    try:
        return date_type.fromisoformat(texto[:10])
    except ValueError:
        return None


def parse_decimal(valor: Any, decimales: int = 2) -> float:
    """Parsear número real redondeado; nulo equivale a 0"""
    if valor is None:
        return 0.0
    try:
        return round(float(valor), decimales)
    except (TypeError, ValueError):
        return 0.0


def normalizar_clave(valor: Any) -> str:
    """lower + trim + sin tildes"""
    if valor is None:
        return ""
    texto = str(valor).strip().lower()
    return "".join(
        c for c in unicodedata.normalize("NFD", texto) if unicodedata.category(c) != "Mn"
    )
