"""
Configuración de la aplicación y base de datos

Gestiona variables de entorno y el motor de conexión a PostgreSQL.
El motor se crea en el arranque de la aplicación (ver main.py) y se
inyecta en cada request mediante get_session.
"""

from functools import lru_cache
from typing import Iterator

from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine


class Settings(BaseSettings):
    """Configuración de la aplicación cargada desde variables de entorno"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    db_username: str
    db_password: str
    db_host: str
    db_port: int
    db_name: str

    # Mostrar el mensaje de la excepción en respuestas 5xx (solo desarrollo)
    mostrar_detalles_error: bool = False

    log_level: str = "INFO"
    log_dir: str = "logs"

    # Tamaño fijo del listado de pacientes
    limite_pacientes: int = 20

    @property
    def database_url(self) -> str:
        """Construir URL de conexión a PostgreSQL"""
        return f"postgresql+psycopg://{self.db_username}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


@lru_cache
def get_settings() -> Settings:
    """Instancia única de configuración"""
    return Settings()  # type: ignore[call-arg]


def crear_engine(settings: Settings) -> Engine:
    """
    Crear el motor de base de datos

    La conexión real se abre de forma perezosa en la primera consulta;
    el pool la reutiliza durante toda la vida del proceso.

    Args:
        settings: Configuración con los datos de conexión

    Returns:
        Engine de SQLAlchemy
    """
    return create_engine(settings.database_url, echo=False, pool_pre_ping=True)


def get_session(request: Request) -> Iterator[Session]:
    """
    Función de dependencia para obtener sesión de base de datos

    Yields:
        Session: Sesión de SQLModel ligada al motor de la aplicación
    """
    with Session(request.app.state.engine) as session:
        yield session
