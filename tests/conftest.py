# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base
from app.repositories.student import StudentRepository
from app.schemas.student import Student
from app.services.student import StudentService


@pytest.fixture
def mock_repo(mocker):
    """Repository stand-in; tests set get_all/save_all behaviour per case"""
    return mocker.create_autospec(StudentRepository, instance=True)

@pytest.fixture
def student_service(mock_repo):
    return StudentService(mock_repo)

@pytest.fixture
def initial_students():
    return [
        Student(id=1, name="Andi", age=21),
        Student(id=2, name="Siti", age=22),
    ]

@pytest.fixture
def session_factory():
    """SQLite in-memory database with the students table created"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()
