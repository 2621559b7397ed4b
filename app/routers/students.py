import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from app.core.exceptions import NotFoundError, StorageError
from app.dependencies import get_student_service
from app.schemas.student import Student, StudentCreate, StudentUpdate
from app.services.student import StudentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/students", tags=["Students"])


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

def _storage_unavailable(e: StorageError) -> HTTPException:
    logger.error(f"Storage failure: {e}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Storage unavailable"
    )


@router.get("", response_model=List[Student])
def list_students(service: StudentService = Depends(get_student_service)):
    """List all students in storage order"""
    try:
        return service.get_all()
    except StorageError as e:
        raise _storage_unavailable(e) from e

@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int = Path(..., description="Student ID"),
    service: StudentService = Depends(get_student_service)
):
    """Get a student by ID"""
    try:
        return service.get_by_id(student_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    except StorageError as e:
        raise _storage_unavailable(e) from e

@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student_in: StudentCreate,
    service: StudentService = Depends(get_student_service)
):
    """Create a student; the ID is assigned by the server"""
    try:
        return service.create(student_in)
    except StorageError as e:
        raise _storage_unavailable(e) from e

@router.put("/{student_id}", response_model=Student)
def update_student(
    student_in: StudentUpdate,
    student_id: int = Path(..., description="Student ID"),
    service: StudentService = Depends(get_student_service)
):
    """Replace a student's name and age"""
    try:
        return service.update(student_id, student_in)
    except NotFoundError as e:
        raise _not_found(e) from e
    except StorageError as e:
        raise _storage_unavailable(e) from e

@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_student(
    student_id: int = Path(..., description="Student ID"),
    service: StudentService = Depends(get_student_service)
):
    """Delete a student"""
    try:
        service.delete(student_id)
    except NotFoundError as e:
        raise _not_found(e) from e
    except StorageError as e:
        raise _storage_unavailable(e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
