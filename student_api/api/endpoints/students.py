from typing import Annotated, List, Union

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from student_api.api.deps import get_db
from student_api.services.student import student as crud_student
from student_api.schemas.student import (
    MessageResponse,
    Student,
    StudentCreate,
    StudentCreated,
    StudentEmailUpdate,
)

router = APIRouter()

# 64-bit signed range, the widest integer key the supported backends store
StudentId = Annotated[int, Path(description="The student ID", ge=-(2**63), le=2**63 - 1)]

VALIDATION_RESPONSE = {400: {"description": "Invalid input"}}


@router.get("", response_model=List[Student], summary="Retrieve all students")
async def get_students(db: AsyncSession = Depends(get_db)):
    """
    A list of students, in storage order.
    """
    students = await crud_student.get_students(db)
    return [Student.model_validate(s) for s in students]


@router.get(
    "/{id}",
    response_model=Union[Student, MessageResponse],
    summary="Retrieve a student by ID",
    responses=VALIDATION_RESPONSE,
)
async def get_student(
    id: StudentId,
    db: AsyncSession = Depends(get_db)
):
    """
    A student object, or `{"message": "Student not found"}` with status 200
    when no row has this ID.
    """
    student = await crud_student.get_student(db, student_id=id)
    if student is None:
        return MessageResponse(message="Student not found")
    return Student.model_validate(student)


@router.post(
    "",
    response_model=StudentCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new student",
    responses=VALIDATION_RESPONSE,
)
async def create_student(
    student: StudentCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Requires:
    - **name**: non-empty, HTML is stripped
    - **email**: valid email address
    - **age**: integer
    """
    student_id = await crud_student.create_student(db, student)
    return StudentCreated(message="Student added successfully", studentId=student_id)


@router.patch(
    "/{id}",
    response_model=MessageResponse,
    summary="Update a student's email",
    responses=VALIDATION_RESPONSE,
)
async def update_student_email(
    body: StudentEmailUpdate,
    id: StudentId,
    db: AsyncSession = Depends(get_db)
):
    await crud_student.update_student_email(db, student_id=id, email=body.email)
    return MessageResponse(message="Student email updated successfully")


@router.delete(
    "/{id}",
    response_model=MessageResponse,
    summary="Delete a student",
    responses=VALIDATION_RESPONSE,
)
async def delete_student(
    id: StudentId,
    db: AsyncSession = Depends(get_db)
):
    await crud_student.delete_student(db, student_id=id)
    return MessageResponse(message="Student deleted successfully")
