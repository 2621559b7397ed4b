import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.core.exceptions import StorageError
from app.models.student import StudentRecord
from app.repositories.base import CollectionRepository
from app.schemas.student import Student

logger = logging.getLogger(__name__)

_student_list = TypeAdapter(List[Student])


class StudentRepository(CollectionRepository[Student]):
    """Storage contract consumed by StudentService."""


class JsonFileStudentRepository(StudentRepository):
    """Keeps the collection as a JSON array in a single file."""

    def __init__(self, path):
        self.path = Path(path)

    def get_all(self) -> List[Student]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            if not raw.strip():
                return []
            return _student_list.validate_python(json.loads(raw))
        except (OSError, ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Error reading students from {self.path}: {e}")
            raise StorageError(f"Cannot read student file {self.path}") from e

    def save_all(self, items: List[Student]) -> None:
        payload = [student.model_dump() for student in items]
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(payload, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError) as e:
            logger.error(f"Error writing students to {self.path}: {e}")
            raise StorageError(f"Cannot write student file {self.path}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)


class DatabaseStudentRepository(StudentRepository):
    """Keeps the collection in the ``students`` table, ordered by ``position``."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def get_all(self) -> List[Student]:
        db: Session = self.session_factory()
        try:
            rows = db.query(StudentRecord).order_by(StudentRecord.position).all()
            return [Student.model_validate(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error reading students from database: {e}")
            raise StorageError("Cannot read students from database") from e
        finally:
            db.close()

    def save_all(self, items: List[Student]) -> None:
        db: Session = self.session_factory()
        try:
            db.query(StudentRecord).delete(synchronize_session=False)
            db.add_all(
                StudentRecord(id=s.id, name=s.name, age=s.age, position=index)
                for index, s in enumerate(items)
            )
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error saving students to database: {e}")
            raise StorageError("Cannot save students to database") from e
        finally:
            db.close()


class InMemoryStudentRepository(StudentRepository):
    """Process-local storage, mostly for tests and demos."""

    def __init__(self, initial: Optional[Iterable[Student]] = None):
        self._students: List[Student] = [s.model_copy() for s in initial or []]

    def get_all(self) -> List[Student]:
        return [s.model_copy() for s in self._students]

    def save_all(self, items: List[Student]) -> None:
        self._students = [s.model_copy() for s in items]


def build_student_repository(settings: Settings) -> StudentRepository:
    """Pick the storage implementation named by ``STORAGE_BACKEND``."""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "json":
        return JsonFileStudentRepository(settings.STUDENTS_FILE)
    if backend == "database":
        from app.core.database import SessionLocal
        return DatabaseStudentRepository(SessionLocal)
    if backend == "memory":
        return InMemoryStudentRepository()
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND!r}")
