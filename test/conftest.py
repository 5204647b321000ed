"""
Fixtures de pruebas

Crea una base SQLite en memoria con las tablas de SQLModel, la puebla con
un conjunto pequeño de registros y reemplaza la dependencia get_session de
la aplicación.

Fecha de referencia de los datos: HOY = 2024-06-01
- Pacientes 1, 2 y 3 tienen 25, 45 y 70 años con diagnósticos
  "Mama", "Pulmon" y "Mama " respectivamente
- Paciente 4 y 5 no tienen fecha de nacimiento; paciente 6 no tiene diagnósticos
- Paciente 4 tiene un tipo de cáncer en blanco ("  ") y otro nulo
- Tratamientos en curso: 1, 3 y 5 (pacientes 1 y 2)
"""

import os
import tempfile
from datetime import date

# Variables de entorno requeridas por Settings antes de importar la app
os.environ.setdefault("DB_USERNAME", "test")
os.environ.setdefault("DB_PASSWORD", "test")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_PORT", "5432")
os.environ.setdefault("DB_NAME", "oncologia_test")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="logs_"))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from main import app
from models import (
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
from utils.settings import get_session

HOY = date(2024, 6, 1)


def poblar_base(session: Session) -> None:
    """Insertar el conjunto de datos de prueba"""
    session.add_all(
        [
            Institucion(
                id_institucion=1,
                nombre_institucion="Hospital Central",
                nivel_complejidad="III",
                ciudad="Bogotá",
            ),
            Institucion(id_institucion=2, nombre_institucion="Clínica Norte"),
            Medicamento(id_medicamento=1, nombre_medicamento="Tamoxifeno"),
            Medicamento(id_medicamento=2, nombre_medicamento="Cisplatino"),
            Medicamento(id_medicamento=3, nombre_medicamento="Anastrozol"),
        ]
    )
    session.add_all(
        [
            UnidadAtencion(id_unidad=1, nombre_unidad="Oncología", id_institucion=1),
            UnidadAtencion(id_unidad=2, nombre_unidad="Radioterapia", id_institucion=2),
            UnidadAtencion(id_unidad=3, nombre_unidad="Ambulatorio"),
        ]
    )
    session.add_all(
        [
            Paciente(
                id_paciente=1,
                primer_nombre="Ana",
                primer_apellido="Gómez",
                segundo_apellido="Ríos",
                sexo="F",
                fecha_nacimiento=date(1999, 3, 10),
                tipo_sangre="O+",
                celular="3001234567",
                municipio="Bogotá",
            ),
            Paciente(
                id_paciente=2,
                primer_nombre="Luis",
                primer_apellido="Pérez",
                sexo="M",
                fecha_nacimiento=date(1979, 1, 15),
            ),
            Paciente(
                id_paciente=3,
                primer_nombre="Marta",
                primer_apellido="Ruiz",
                sexo="F",
                fecha_nacimiento=date(1954, 2, 1),
            ),
            Paciente(id_paciente=4, primer_nombre="José", primer_apellido="Díaz"),
            Paciente(id_paciente=5, primer_nombre="Elena", primer_apellido="Mora"),
            Paciente(
                id_paciente=6,
                primer_nombre="Tomás",
                primer_apellido="León",
                fecha_nacimiento=date(2010, 1, 1),
            ),
        ]
    )
    session.add_all(
        [
            Diagnostico(
                id_diagnostico=1,
                id_paciente=1,
                tipo_cancer="Mama",
                estadio_enfermedad="II",
                fecha_diagnostico=date(2024, 6, 3),
            ),
            Diagnostico(
                id_diagnostico=2,
                id_paciente=2,
                tipo_cancer="Pulmon",
                estadio_enfermedad="III",
                fecha_diagnostico=date(2023, 11, 20),
                observaciones="Fumador",
            ),
            Diagnostico(
                id_diagnostico=3,
                id_paciente=3,
                tipo_cancer="Mama ",
                estadio_enfermedad="I",
            ),
            Diagnostico(
                id_diagnostico=4,
                id_paciente=4,
                tipo_cancer="  ",
                estadio_enfermedad="IV",
                fecha_diagnostico=date(2024, 6, 15),
            ),
            Diagnostico(
                id_diagnostico=5,
                id_paciente=5,
                tipo_cancer="Colon",
                fecha_diagnostico=date(2022, 1, 1),
            ),
            Diagnostico(
                id_diagnostico=6,
                id_paciente=5,
                tipo_cancer="Prostata",
                estadio_enfermedad="  ",
            ),
            Diagnostico(
                id_diagnostico=7,
                id_paciente=5,
                tipo_cancer="Colon",
                estadio_enfermedad="II",
                fecha_diagnostico=date(2023, 1, 1),
            ),
            Diagnostico(id_diagnostico=8, id_paciente=4, tipo_cancer=None),
        ]
    )
    session.add_all(
        [
            Tratamiento(
                id_tratamiento=1,
                id_diagnostico=1,
                tipo_tratamiento="Quimioterapia",
                fecha_inicio=date(2024, 1, 1),
            ),
            Tratamiento(
                id_tratamiento=2,
                id_diagnostico=2,
                tipo_tratamiento="Radioterapia",
                fecha_inicio=date(2022, 5, 1),
                fecha_fin=date(2023, 1, 1),
                resultado_clinico_final="Remisión parcial",
            ),
            Tratamiento(
                id_tratamiento=3,
                id_diagnostico=2,
                tipo_tratamiento="Quimioterapia",
                fecha_inicio=date(2024, 5, 1),
                fecha_fin=date(2024, 6, 20),
            ),
            Tratamiento(
                id_tratamiento=4,
                id_diagnostico=3,
                tipo_tratamiento="Cirugía",
                fecha_inicio=date(2024, 7, 1),
            ),
            Tratamiento(
                id_tratamiento=5,
                id_diagnostico=1,
                tipo_tratamiento="Hormonoterapia",
                fecha_inicio=date(2024, 3, 1),
            ),
            Tratamiento(id_tratamiento=6, id_diagnostico=4),
        ]
    )
    session.add_all(
        [
            Atencion(id_atencion=1, id_tratamiento=1, id_unidad=1, observaciones="Primera sesión"),
            Atencion(id_atencion=2, id_tratamiento=1, id_unidad=2, observaciones="Control"),
            Atencion(id_atencion=3, id_tratamiento=5, id_unidad=3),
            Atencion(id_atencion=4, id_tratamiento=3, id_unidad=1),
        ]
    )
    session.add_all(
        [
            Prescripcion(
                id_prescripcion=1,
                id_tratamiento=1,
                id_medicamento=1,
                dosis="20 mg",
                frecuencia="Diaria",
                duracion_dias=30,
                fecha_prescripcion=date(2024, 1, 5),
            ),
            Prescripcion(
                id_prescripcion=2,
                id_tratamiento=1,
                id_medicamento=2,
                dosis="50 mg/m2",
                frecuencia="Semanal",
                duracion_dias=60,
                fecha_prescripcion=date(2024, 2, 1),
            ),
            Prescripcion(
                id_prescripcion=3,
                id_tratamiento=3,
                id_medicamento=2,
                dosis="75 mg/m2",
                frecuencia="Cada 21 días",
                duracion_dias=90,
                fecha_prescripcion=date(2024, 5, 2),
            ),
            Prescripcion(id_prescripcion=4, id_tratamiento=1, id_medicamento=99),
        ]
    )
    session.add_all(
        [
            ActividadTratamiento(
                id_actividad=1,
                id_tratamiento=1,
                tipo_actividad="Consulta",
                fecha_actividad=date(2024, 1, 10),
                medico_responsable="Dra. Salas",
            ),
            ActividadTratamiento(
                id_actividad=2,
                id_tratamiento=1,
                tipo_actividad="Laboratorio",
                fecha_actividad=date(2024, 2, 10),
                nombre_procedimiento="Hemograma",
                id_unidad=1,
                enlace_archivo="https://archivos.example.org/hemograma.pdf",
            ),
            ActividadTratamiento(id_actividad=3, id_tratamiento=1, tipo_actividad="Imagen"),
        ]
    )
    session.commit()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        poblar_base(session)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def get_session_prueba():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = get_session_prueba
    yield TestClient(app)
    app.dependency_overrides.clear()
