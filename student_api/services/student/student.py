import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from student_api.core.exceptions import StorageError
from student_api.core.sanitize import sanitize_text
from student_api.models.student import Student, students_table
from student_api.schemas.student import StudentCreate

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str):
    """Turn SQLAlchemy failures into StorageError, logging the driver message."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception(f"Storage error during {operation}")
        raise StorageError() from e


async def get_students(db: AsyncSession) -> List[Student]:
    """All rows, in whatever order storage returns them"""
    with storage_errors("list students"):
        result = await db.execute(select(Student))
        return list(result.scalars().all())


async def get_student(db: AsyncSession, student_id: int) -> Optional[Student]:
    with storage_errors("get student"):
        result = await db.execute(select(Student).where(Student.id == student_id))
        return result.scalars().first()


async def create_student(db: AsyncSession, student: StudentCreate) -> int:
    """Insert one student and return the id storage generated for it."""
    with storage_errors("create student"):
        result = await db.execute(
            insert(students_table).values(
                name=sanitize_text(student.name),
                email=sanitize_text(student.email),
                age=student.age,
            )
        )
        await db.commit()
        return result.inserted_primary_key[0]


async def update_student_email(db: AsyncSession, student_id: int, email: str) -> None:
    # No check on rowcount: an unknown id is not an error
    with storage_errors("update student email"):
        await db.execute(
            update(students_table).where(students_table.c.id == student_id).values(email=sanitize_text(email))
        )
        await db.commit()


async def delete_student(db: AsyncSession, student_id: int) -> None:
    with storage_errors("delete student"):
        await db.execute(delete(students_table).where(students_table.c.id == student_id))
        await db.commit()
