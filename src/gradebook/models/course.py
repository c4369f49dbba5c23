# File: src/gradebook/models/course.py
from typing import List

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, JSON

from src.gradebook.utils.time import utc_now


class Course(SQLModel, table=True):
    __tablename__ = "course"
    __table_args__ = {"extend_existing": True}

    id: str = Field(primary_key=True)
    name: str
    code: str = Field(index=True)
    description: str = ""
    teacher_id: str = Field(index=True)
    # Roster, in enrollment order. Always reassigned, never mutated in place.
    student_ids: List[str] = Field(sa_type=JSON, default_factory=list)
    created_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)

    @property
    def roster_size(self) -> int:
        return len(self.student_ids or [])
