class StudentAppError(Exception):
    """Base exception for the student records service"""
    pass

class StorageError(StudentAppError):
    """Raised by a repository when the collection cannot be read or written"""
    pass

class NotFoundError(StudentAppError):
    """Raised when no student has the requested ID"""

    def __init__(self, student_id: int):
        self.student_id = student_id
        super().__init__(f"Student {student_id} not found")
