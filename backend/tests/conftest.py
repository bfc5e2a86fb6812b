import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the application engine in memory and the log file off during tests
os.environ.setdefault("STUDENT_API_DATABASE_URL", "sqlite://")
os.environ.setdefault("STUDENT_API_LOG_FILE_ENABLED", "false")

# Now import after path and environment are set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from main import app
from models import Student


@pytest.fixture
def db_engine():
    """In-memory database shared by every connection of a single test"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """Test client whose routes use the test session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def create_student(db_session):
    """Insert a student directly, bypassing validation"""
    def _create(first_name="Tom", last_name="Cruise", email="tom.cruise@example.com"):
        student = Student(first_name=first_name, last_name=last_name, email=email)
        db_session.add(student)
        db_session.commit()
        db_session.refresh(student)
        return student

    return _create
