"""
Servicio de reportes agregados para el dashboard

Reportes disponibles:
- Resumen KPI: pacientes activos, nuevos diagnósticos del mes,
  tratamientos en curso y altas del mes
- Distribución de diagnósticos por tipo de cáncer
- Costos por tipo de tratamiento (conteo como métrica)
- Inventario por medicamento (conteo de prescripciones como métrica)
- Distribución por grupo de edad y tipo de cáncer

Todas las funciones que dependen de la fecha reciben `hoy` y lo envían como
parámetro a SQL, de modo que todas las subconsultas de un reporte usan la
misma fecha de referencia.
"""

import re
from datetime import date as date_type
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import Date, bindparam
from sqlmodel import Session, text

from app_types.reportes import (
    ConteosCancer,
    CostoTratamiento,
    DistribucionTipoCancer,
    EdadPorCancer,
    InventarioMedicamento,
    PorcentajesCancer,
    ResumenKPI,
)
from services.normalizacion import (
    normalizar_clave,
    parse_decimal,
    parse_fecha,
    parse_int,
)
from utils.logging_config import get_logger

logger = get_logger(__name__)

# ============================================================================
# DEFINICIONES CANÓNICAS
# ============================================================================

# Etiqueta para tipo de cáncer nulo o vacío
ETIQUETA_SIN_ESPECIFICAR = "Sin especificar"

# Grupos de edad: (etiqueta, edad mínima, edad máxima inclusiva o None)
GRUPOS_EDAD: Sequence[Tuple[str, int, Optional[int]]] = (
    ("0-17", 0, 17),
    ("18-35", 18, 35),
    ("36-55", 36, 55),
    ("56-75", 56, 75),
    ("76+", 76, None),
)

# Categorías de cáncer del reporte por edad: (etiqueta, prefijos normalizados).
# Gana la primera categoría cuyo prefijo coincide con alguna palabra.
CATEGORIAS_CANCER: Sequence[Tuple[str, Tuple[str, ...]]] = (
    ("Mama", ("mama",)),
    ("Prostata", ("prostat",)),
    ("Pulmon", ("pulmon",)),
    ("Colon", ("colon", "colorrectal")),
)
CATEGORIA_OTRO = "Otro"

# Tratamiento en curso a la fecha :hoy. Compartido por pacientes_activos y
# tratamientos_en_curso.
PREDICADO_EN_CURSO = (
    "t.fecha_inicio <= :hoy AND (t.fecha_fin IS NULL OR t.fecha_fin >= :hoy)"
)


# ============================================================================
# UTILIDADES
# ============================================================================


def limites_mes(hoy: date_type) -> Tuple[date_type, date_type]:
    """
    Calcular el rango [primer día del mes, primer día del mes siguiente)

    Args:
        hoy: Fecha de referencia

    Returns:
        Tupla (inicio_mes, inicio_mes_siguiente)
    """
    inicio = hoy.replace(day=1)
    if inicio.month == 12:
        siguiente = inicio.replace(year=inicio.year + 1, month=1)
    else:
        siguiente = inicio.replace(month=inicio.month + 1)
    return inicio, siguiente


def calcular_edad(fecha_nacimiento: Any, hoy: date_type) -> Optional[int]:
    """
    Calcular la edad en años cumplidos

    Returns:
        Edad o None si la fecha falta, no es interpretable o es futura
    """
    nacimiento = parse_fecha(fecha_nacimiento)
    if nacimiento is None or nacimiento > hoy:
        return None
    cumplio = (hoy.month, hoy.day) >= (nacimiento.month, nacimiento.day)
    return hoy.year - nacimiento.year - (0 if cumplio else 1)


def clasificar_edad(edad: Optional[int]) -> Optional[str]:
    """Etiqueta del grupo de edad, o None si la edad no es válida"""
    if edad is None or edad < 0:
        return None
    for etiqueta, minimo, maximo in GRUPOS_EDAD:
        if edad >= minimo and (maximo is None or edad <= maximo):
            return etiqueta
    return None


def clasificar_cancer(tipo_cancer: Any) -> str:
    """
    Asignar un tipo de cáncer en texto libre a una categoría del reporte

    La comparación ignora mayúsculas, tildes y espacios, y compara por
    prefijo de cada palabra ("Cáncer de mama", "MAMA", "Próstata",
    "Carcinoma pulmonar"). Lo que no coincide, incluido nulo o vacío,
    va a "Otro".
    """
    palabras = re.findall(r"[a-z0-9]+", normalizar_clave(tipo_cancer))
    for etiqueta, prefijos in CATEGORIAS_CANCER:
        for palabra in palabras:
            if palabra.startswith(prefijos):
                return etiqueta
    return CATEGORIA_OTRO


def construir_distribucion_edad(
    filas: Iterable[Tuple[Any, Any, Any]], hoy: date_type
) -> List[EdadPorCancer]:
    """
    Construir la tabla dinámica grupo de edad x categoría de cáncer

    Args:
        filas: Tuplas (fecha_nacimiento, tipo_cancer, cantidad de diagnósticos)
        hoy: Fecha de referencia para la edad

    Returns:
        Una fila por grupo de edad, siempre todos los grupos y en el orden
        de GRUPOS_EDAD. Los conteos de cada fila suman su total; los
        porcentajes son nulos cuando el total es 0.
    """
    categorias = [etiqueta for etiqueta, _ in CATEGORIAS_CANCER] + [CATEGORIA_OTRO]
    conteos: Dict[str, Dict[str, int]] = {
        etiqueta: {categoria: 0 for categoria in categorias}
        for etiqueta, _, _ in GRUPOS_EDAD
    }

    excluidos = 0
    for fecha_nacimiento, tipo_cancer, cantidad in filas:
        grupo = clasificar_edad(calcular_edad(fecha_nacimiento, hoy))
        n = parse_int(cantidad, 0) or 0
        if grupo is None:
            excluidos += n
            continue
        conteos[grupo][clasificar_cancer(tipo_cancer)] += n

    if excluidos:
        logger.debug(f"Diagnósticos sin edad válida excluidos: {excluidos}")

    resultado = []
    for etiqueta, _, _ in GRUPOS_EDAD:
        fila = conteos[etiqueta]
        total = sum(fila.values())
        if total > 0:
            porcentajes = {c: round(100.0 * fila[c] / total, 2) for c in categorias}
        else:
            porcentajes = {c: None for c in categorias}
        resultado.append(
            EdadPorCancer(
                grupo=etiqueta,
                total=total,
                conteos=ConteosCancer(**fila),
                porcentajes=PorcentajesCancer(**porcentajes),
            )
        )
    return resultado


# ============================================================================
# REPORTES
# ============================================================================


def get_resumen(session: Session, hoy: Optional[date_type] = None) -> ResumenKPI:
    """
    Calcular el resumen KPI del dashboard

    Los cuatro contadores se obtienen en una sola sentencia, por lo que
    comparten instantánea y fecha de referencia:
    - pacientes_activos: pacientes distintos con algún tratamiento en curso
    - nuevos_mes: diagnósticos con fecha en el mes de `hoy`
    - tratamientos_en_curso: tratamientos en curso a la fecha `hoy`
    - altas_mes: tratamientos con fecha_fin en el mes de `hoy`

    Args:
        session: Sesión de base de datos
        hoy: Fecha de referencia (por defecto la fecha actual)

    Returns:
        ResumenKPI
    """
    hoy = hoy or date_type.today()
    inicio_mes, inicio_mes_siguiente = limites_mes(hoy)

    query = text(f"""
        SELECT
          (SELECT COUNT(DISTINCT d.id_paciente)
             FROM tratamiento t
             JOIN diagnostico d ON d.id_diagnostico = t.id_diagnostico
             WHERE {PREDICADO_EN_CURSO}
          ) AS pacientes_activos,
          (SELECT COUNT(*)
             FROM diagnostico d
             WHERE d.fecha_diagnostico >= :inicio_mes
               AND d.fecha_diagnostico < :inicio_mes_siguiente
          ) AS nuevos_mes,
          (SELECT COUNT(*)
             FROM tratamiento t
             WHERE {PREDICADO_EN_CURSO}
          ) AS tratamientos_en_curso,
          (SELECT COUNT(*)
             FROM tratamiento t
             WHERE t.fecha_fin >= :inicio_mes
               AND t.fecha_fin < :inicio_mes_siguiente
          ) AS altas_mes
    """).bindparams(
        bindparam("hoy", type_=Date),
        bindparam("inicio_mes", type_=Date),
        bindparam("inicio_mes_siguiente", type_=Date),
    )

    row = session.execute(
        query,
        {
            "hoy": hoy,
            "inicio_mes": inicio_mes,
            "inicio_mes_siguiente": inicio_mes_siguiente,
        },
    ).fetchone()

    resumen = ResumenKPI(
        pacientes_activos=parse_int(row.pacientes_activos, 0) if row else 0,
        nuevos_mes=parse_int(row.nuevos_mes, 0) if row else 0,
        tratamientos_en_curso=parse_int(row.tratamientos_en_curso, 0) if row else 0,
        altas_mes=parse_int(row.altas_mes, 0) if row else 0,
    )
    logger.info(f"Resumen KPI al {hoy.isoformat()}: {resumen.model_dump()}")
    return resumen


def get_distribucion_tipos_cancer(session: Session) -> List[DistribucionTipoCancer]:
    """
    Contar diagnósticos por tipo de cáncer

    Los tipos nulos o vacíos se agrupan bajo ETIQUETA_SIN_ESPECIFICAR.
    Orden: cantidad descendente y nombre como desempate.
    """
    query = text(f"""
        SELECT
          COALESCE(NULLIF(TRIM(d.tipo_cancer), ''), '{ETIQUETA_SIN_ESPECIFICAR}') AS name,
          COUNT(*) AS value
        FROM diagnostico d
        GROUP BY 1
        ORDER BY value DESC, name ASC
    """)

    rows = session.execute(query).fetchall()
    logger.info(f"Distribución por tipo de cáncer: {len(rows)} tipos")

    return [
        DistribucionTipoCancer(name=row.name, value=parse_int(row.value, 0))
        for row in rows
    ]


def get_costos_tratamiento(session: Session) -> List[CostoTratamiento]:
    """
    Costos por tipo de tratamiento

    El esquema no tiene datos de costo: cost es el número de tratamientos
    de cada tipo y cada fila lo declara con metrica="conteo_tratamientos".
    Los tratamientos sin tipo no se incluyen.
    """
    query = text("""
        SELECT
            TRIM(t.tipo_tratamiento) AS name,
            COUNT(*)                 AS cost
        FROM tratamiento t
        WHERE t.tipo_tratamiento IS NOT NULL
          AND TRIM(t.tipo_tratamiento) <> ''
        GROUP BY 1
        ORDER BY cost DESC, name ASC
    """)

    rows = session.execute(query).fetchall()
    logger.info(f"Costos por tipo de tratamiento: {len(rows)} tipos")

    return [
        CostoTratamiento(name=row.name, cost=parse_decimal(row.cost))
        for row in rows
    ]


def get_inventario(session: Session) -> List[InventarioMedicamento]:
    """
    Inventario por medicamento

    El esquema no tiene tabla de existencias: stock es el número de
    prescripciones que referencian al medicamento (0 si no tiene) y cada
    fila lo declara con metrica="conteo_prescripciones". Hay una fila por
    id_medicamento aunque dos medicamentos compartan nombre.
    """
    query = text("""
        SELECT
            m.nombre_medicamento     AS name,
            COUNT(p.id_prescripcion) AS stock
        FROM medicamento m
        LEFT JOIN prescripcion p ON p.id_medicamento = m.id_medicamento
        GROUP BY m.id_medicamento, m.nombre_medicamento
        ORDER BY stock DESC, name ASC NULLS LAST, m.id_medicamento
    """)

    rows = session.execute(query).fetchall()
    logger.info(f"Inventario: {len(rows)} medicamentos")

    return [
        InventarioMedicamento(name=row.name, stock=max(parse_int(row.stock, 0) or 0, 0))
        for row in rows
    ]


def get_edad_por_cancer(
    session: Session, hoy: Optional[date_type] = None
) -> List[EdadPorCancer]:
    """
    Distribución de diagnósticos por grupo de edad y tipo de cáncer

    SQL agrupa los diagnósticos por fecha de nacimiento del paciente y tipo
    de cáncer; la edad, el grupo y la categoría se resuelven en
    construir_distribucion_edad. Diagnósticos de pacientes sin fecha de
    nacimiento quedan fuera de todos los grupos.

    Args:
        session: Sesión de base de datos
        hoy: Fecha de referencia para la edad (por defecto la fecha actual)

    Returns:
        Lista de EdadPorCancer, una por grupo de edad
    """
    hoy = hoy or date_type.today()

    query = text("""
        SELECT
            p.fecha_nacimiento,
            d.tipo_cancer,
            COUNT(*) AS cantidad
        FROM diagnostico d
        JOIN paciente p ON p.id_paciente = d.id_paciente
        WHERE p.fecha_nacimiento IS NOT NULL
        GROUP BY p.fecha_nacimiento, d.tipo_cancer
    """)

    rows = session.execute(query).fetchall()
    filas = [(row.fecha_nacimiento, row.tipo_cancer, row.cantidad) for row in rows]

    resultado = construir_distribucion_edad(filas, hoy)
    logger.info(
        f"Distribución edad x cáncer al {hoy.isoformat()}: "
        f"{sum(fila.total for fila in resultado)} diagnósticos"
    )
    return resultado
