import logging
import threading
from typing import List

from app.core.exceptions import NotFoundError
from app.repositories.student import StudentRepository
from app.schemas.student import Student, StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


class StudentService:
    """CRUD over the student collection.

    Every call reads the whole collection from the repository once and, when
    it changes something, writes the whole collection back once. Repository
    errors are never caught here, so callers see the exact ``StorageError``
    the repository raised.

    Calls on one instance are serialized by a lock; two services sharing the
    same storage are not coordinated.
    """

    def __init__(self, repository: StudentRepository):
        self.repository = repository
        self._lock = threading.Lock()

    def get_all(self) -> List[Student]:
        with self._lock:
            return self.repository.get_all()

    def get_by_id(self, student_id: int) -> Student:
        with self._lock:
            students = self.repository.get_all()
            index = self._find_index(students, student_id)
            return students[index]

    def create(self, data: StudentCreate) -> Student:
        with self._lock:
            students = self.repository.get_all()

            # max + 1 rather than len + 1, so IDs freed by deletes are not reissued
            next_id = max((s.id for s in students), default=0) + 1
            student = Student(id=next_id, name=data.name, age=data.age)

            self.repository.save_all(students + [student])
            logger.info(f"Created student {student.id}")
            return student

    def update(self, student_id: int, data: StudentUpdate) -> Student:
        with self._lock:
            students = self.repository.get_all()
            index = self._find_index(students, student_id)

            updated = students[index].model_copy(update={"name": data.name, "age": data.age})
            new_students = list(students)
            new_students[index] = updated

            self.repository.save_all(new_students)
            logger.info(f"Updated student {student_id}")
            return updated

    def delete(self, student_id: int) -> None:
        with self._lock:
            students = self.repository.get_all()
            index = self._find_index(students, student_id)

            self.repository.save_all(students[:index] + students[index + 1:])
            logger.info(f"Deleted student {student_id}")

    @staticmethod
    def _find_index(students: List[Student], student_id: int) -> int:
        for index, student in enumerate(students):
            if student.id == student_id:
                return index
        logger.warning(f"Student {student_id} not found")
        raise NotFoundError(student_id)
