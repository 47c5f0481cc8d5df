"""
Test configuration and fixtures
"""

import os

# Set test environment variables BEFORE importing app modules
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["APP_NAME"] = "partidasApp"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("ASOCIACIONES_PATH", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.main import app
from app.models.partida import Partida
from app.repositories.asociaciones import AsociacionesEnMemoria, get_asociaciones

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def asociaciones():
    """Empty association registry; tests register games and players as needed"""
    return AsociacionesEnMemoria()


@pytest.fixture(scope="function")
def client(db_session, asociaciones):
    """Create a test client with database and association overrides"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_asociaciones] = lambda: asociaciones
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_partida(db_session):
    """Insert a partida directly in the database and return it"""

    def _make(ganador="A", perdedor="B", puntos=10):
        partida = Partida(ganador=ganador, perdedor=perdedor, puntos_del_ganador=puntos)
        db_session.add(partida)
        db_session.commit()
        db_session.refresh(partida)
        return partida

    return _make


@pytest.fixture
def sample_partida_data():
    """Valid JSON body for a new partida"""
    return {"ganador": "A", "perdedor": "B", "puntosDelGanador": 10}
