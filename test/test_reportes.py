"""
Pruebas de los reportes agregados del dashboard
"""

from datetime import date

import pytest
from sqlmodel import select

from conftest import HOY
from models import Medicamento, Prescripcion, Tratamiento
from services.reportes import (
    CATEGORIA_OTRO,
    ETIQUETA_SIN_ESPECIFICAR,
    GRUPOS_EDAD,
    calcular_edad,
    clasificar_cancer,
    clasificar_edad,
    construir_distribucion_edad,
    get_costos_tratamiento,
    get_distribucion_tipos_cancer,
    get_edad_por_cancer,
    get_inventario,
    get_resumen,
    limites_mes,
)

# ============================================================================
# RESUMEN KPI
# ============================================================================


def test_resumen_kpi(session):
    resumen = get_resumen(session, hoy=HOY)

    assert resumen.pacientes_activos == 2
    assert resumen.nuevos_mes == 2
    assert resumen.tratamientos_en_curso == 3
    assert resumen.altas_mes == 1


def test_resumen_fecha_fin_en_el_limite_cuenta_como_en_curso(session):
    resumen = get_resumen(session, hoy=date(2023, 1, 1))

    # Solo el tratamiento 2 (2022-05-01 .. 2023-01-01) está vigente ese día
    assert resumen.tratamientos_en_curso == 1
    assert resumen.pacientes_activos == 1
    assert resumen.altas_mes == 1
    assert resumen.nuevos_mes == 1


def test_resumen_tratamiento_abierto_y_tratamiento_finalizado(session):
    ids_en_curso = {
        t.id_tratamiento
        for t in session.exec(select(Tratamiento)).all()
        if t.fecha_inicio is not None
        and t.fecha_inicio <= HOY
        and (t.fecha_fin is None or t.fecha_fin >= HOY)
    }

    # inicio 2024-01-01 sin fin: en curso; fin 2023-01-01: excluido
    assert 1 in ids_en_curso
    assert 2 not in ids_en_curso
    assert get_resumen(session, hoy=HOY).tratamientos_en_curso == len(ids_en_curso)


def test_resumen_base_vacia_devuelve_ceros(session):
    for tratamiento in session.exec(select(Tratamiento)).all():
        session.delete(tratamiento)
    session.commit()

    resumen = get_resumen(session, hoy=HOY)

    assert resumen.pacientes_activos == 0
    assert resumen.tratamientos_en_curso == 0
    assert resumen.altas_mes == 0


@pytest.mark.parametrize(
    "hoy, esperado",
    [
        (date(2024, 6, 1), (date(2024, 6, 1), date(2024, 7, 1))),
        (date(2024, 12, 31), (date(2024, 12, 1), date(2025, 1, 1))),
        (date(2024, 2, 29), (date(2024, 2, 1), date(2024, 3, 1))),
    ],
)
def test_limites_mes(hoy, esperado):
    assert limites_mes(hoy) == esperado


# ============================================================================
# DISTRIBUCIÓN, COSTOS E INVENTARIO
# ============================================================================


def test_distribucion_tipos_cancer(session):
    distribucion = get_distribucion_tipos_cancer(session)

    assert [(d.name, d.value) for d in distribucion] == [
        ("Colon", 2),
        ("Mama", 2),
        (ETIQUETA_SIN_ESPECIFICAR, 2),
        ("Prostata", 1),
        ("Pulmon", 1),
    ]


def test_distribucion_tipo_nulo_y_vacio_comparten_etiqueta(session):
    distribucion = get_distribucion_tipos_cancer(session)
    nombres = [d.name for d in distribucion]

    # Diagnóstico 4 ("  ") y diagnóstico 8 (NULL) caen en la misma fila
    assert nombres.count(ETIQUETA_SIN_ESPECIFICAR) == 1
    sin_especificar = next(d for d in distribucion if d.name == ETIQUETA_SIN_ESPECIFICAR)
    assert sin_especificar.value == 2
    assert all(nombre and nombre.strip() for nombre in nombres)


def test_costos_tratamiento_usa_conteo(session):
    costos = get_costos_tratamiento(session)

    assert [(c.name, c.cost) for c in costos] == [
        ("Quimioterapia", 2.0),
        ("Cirugía", 1.0),
        ("Hormonoterapia", 1.0),
        ("Radioterapia", 1.0),
    ]
    assert {c.metrica for c in costos} == {"conteo_tratamientos"}


def test_inventario_incluye_medicamentos_sin_prescripciones(session):
    inventario = get_inventario(session)

    assert [(i.name, i.stock) for i in inventario] == [
        ("Cisplatino", 2),
        ("Tamoxifeno", 1),
        ("Anastrozol", 0),
    ]
    assert {i.metrica for i in inventario} == {"conteo_prescripciones"}


def test_inventario_cuenta_por_medicamento_aunque_compartan_nombre(session):
    session.add(Medicamento(id_medicamento=4, nombre_medicamento="Cisplatino"))
    session.add(Prescripcion(id_prescripcion=5, id_tratamiento=3, id_medicamento=4))
    session.commit()

    inventario = get_inventario(session)

    assert [(i.name, i.stock) for i in inventario] == [
        ("Cisplatino", 2),
        ("Cisplatino", 1),
        ("Tamoxifeno", 1),
        ("Anastrozol", 0),
    ]


def test_inventario_medicamento_sin_nombre(client, session):
    session.add(Medicamento(id_medicamento=5, nombre_medicamento=None))
    session.commit()

    inventario = get_inventario(session)
    assert (inventario[-1].name, inventario[-1].stock) == (None, 0)

    response = client.get("/api/v1/reportes/inventario")
    assert response.status_code == 200
    assert response.json()[-1] == {
        "name": None,
        "stock": 0,
        "metrica": "conteo_prescripciones",
    }


# ============================================================================
# EDAD POR TIPO DE CÁNCER
# ============================================================================


@pytest.mark.parametrize(
    "texto, categoria",
    [
        ("Mama", "Mama"),
        ("  MAMA ", "Mama"),
        ("Cáncer de mama", "Mama"),
        ("Próstata", "Prostata"),
        ("prostatico", "Prostata"),
        ("Pulmón", "Pulmon"),
        ("Carcinoma pulmonar", "Pulmon"),
        ("Colon", "Colon"),
        ("Colorrectal", "Colon"),
        ("Leucemia", CATEGORIA_OTRO),
        ("", CATEGORIA_OTRO),
        (None, CATEGORIA_OTRO),
    ],
)
def test_clasificar_cancer(texto, categoria):
    assert clasificar_cancer(texto) == categoria


@pytest.mark.parametrize(
    "edad, grupo",
    [
        (0, "0-17"),
        (17, "0-17"),
        (18, "18-35"),
        (35, "18-35"),
        (36, "36-55"),
        (55, "36-55"),
        (56, "56-75"),
        (75, "56-75"),
        (76, "76+"),
        (104, "76+"),
        (-1, None),
        (None, None),
    ],
)
def test_clasificar_edad(edad, grupo):
    assert clasificar_edad(edad) == grupo


def test_calcular_edad():
    hoy = date(2024, 6, 1)

    assert calcular_edad(date(2000, 6, 1), hoy) == 24
    assert calcular_edad(date(2000, 6, 2), hoy) == 23
    assert calcular_edad("1990-01-01", hoy) == 34
    assert calcular_edad(date(2030, 1, 1), hoy) is None
    assert calcular_edad("sin fecha", hoy) is None
    assert calcular_edad(None, hoy) is None


def test_distribucion_edad_escenario_tres_pacientes(session):
    filas = {f.grupo: f for f in get_edad_por_cancer(session, hoy=HOY)}

    assert list(filas) == [etiqueta for etiqueta, _, _ in GRUPOS_EDAD]

    assert filas["18-35"].total == 1
    assert filas["18-35"].conteos.Mama == 1
    assert filas["18-35"].porcentajes.Mama == 100.0

    assert filas["36-55"].total == 1
    assert filas["36-55"].conteos.Pulmon == 1
    assert filas["36-55"].porcentajes.Pulmon == 100.0

    assert filas["56-75"].total == 1
    assert filas["56-75"].conteos.Mama == 1
    assert filas["56-75"].porcentajes.Mama == 100.0

    # Pacientes sin fecha de nacimiento o sin diagnósticos no aparecen
    assert filas["0-17"].total == 0
    assert filas["76+"].total == 0


def test_distribucion_edad_grupo_vacio_tiene_porcentajes_nulos(session):
    fila = get_edad_por_cancer(session, hoy=HOY)[0]

    assert fila.grupo == "0-17"
    assert fila.porcentajes.model_dump() == {
        "Mama": None,
        "Prostata": None,
        "Pulmon": None,
        "Colon": None,
        "Otro": None,
    }


def test_construir_distribucion_edad_excluye_edades_invalidas():
    filas = [
        (date(1990, 1, 1), "Mama", 3),
        (date(1990, 1, 1), "Colon", 1),
        (date(1989, 5, 5), "Linfoma", 2),
        (None, "Mama", 5),
        ("no es fecha", "Pulmon", 2),
        (date(2030, 1, 1), "Mama", 1),
    ]

    resultado = {f.grupo: f for f in construir_distribucion_edad(filas, date(2024, 6, 1))}

    fila = resultado["18-35"]
    assert fila.total == 6
    assert fila.conteos.model_dump() == {
        "Mama": 3,
        "Prostata": 0,
        "Pulmon": 0,
        "Colon": 1,
        "Otro": 2,
    }
    assert fila.porcentajes.Mama == 50.0
    assert fila.porcentajes.Colon == 16.67
    assert fila.porcentajes.Otro == 33.33
    assert sum(f.total for f in resultado.values()) == 6


def test_construir_distribucion_edad_conteos_suman_total():
    filas = [
        (date(1950 + i, 1 + i % 12, 1), tipo, i + 1)
        for i, tipo in enumerate(
            ["Mama", "Pulmón", "Próstata", "colon", None, "", "Mama", "Otro"] * 6
        )
    ]

    for fila in construir_distribucion_edad(filas, date(2024, 6, 1)):
        assert sum(fila.conteos.model_dump().values()) == fila.total


# ============================================================================
# RUTAS
# ============================================================================


@pytest.mark.parametrize(
    "ruta",
    [
        "/api/v1/reportes/resumen",
        "/api/v1/reportes/cancer-tipos",
        "/api/v1/reportes/costos-tratamiento",
        "/api/v1/reportes/inventario",
        "/api/v1/reportes/edad-por-cancer",
    ],
)
def test_reportes_son_idempotentes(client, ruta):
    primera = client.get(ruta)
    segunda = client.get(ruta)

    assert primera.status_code == 200
    assert primera.headers["content-type"] == "application/json; charset=utf-8"
    assert primera.content == segunda.content


def test_ruta_edad_por_cancer(client):
    response = client.get("/api/v1/reportes/edad-por-cancer")

    assert response.status_code == 200
    filas = response.json()
    assert [f["grupo"] for f in filas] == ["0-17", "18-35", "36-55", "56-75", "76+"]
    for fila in filas:
        assert sum(fila["conteos"].values()) == fila["total"]


def test_ruta_resumen(client):
    response = client.get("/api/v1/reportes/resumen")

    assert response.status_code == 200
    assert set(response.json()) == {
        "pacientes_activos",
        "nuevos_mes",
        "tratamientos_en_curso",
        "altas_mes",
    }
