from functools import lru_cache
from app.core.config import settings
from app.repositories.student import build_student_repository
from app.services.student import StudentService

@lru_cache
def get_student_service() -> StudentService:
    """One service (and one lock) per process, wired from settings."""
    return StudentService(build_student_repository(settings))
