from sqlalchemy import Column, Integer, String, CheckConstraint

from app.models.base import Base


class StudentRecord(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    age = Column(Integer, nullable=False)
    # Storage order of the collection, rewritten on every save
    position = Column(Integer, nullable=False, index=True)

    __table_args__ = (
        CheckConstraint('age >= 0', name='check_student_age_non_negative'),
    )
