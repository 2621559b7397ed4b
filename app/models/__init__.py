from .base import Base
from .student import StudentRecord
