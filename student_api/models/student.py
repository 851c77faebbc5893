from sqlalchemy import Column, Integer, String
from student_api.core.database import Base


class Student(Base):
    __tablename__ = "students"
    # ids are never handed out twice, even after the highest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)


# Core table, for single-statement writes that bypass the unit of work
students_table = Student.__table__
