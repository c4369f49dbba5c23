# File: src/gradebook/schemas/course.py
from pydantic import BaseModel, Field
from typing import List, Optional

from src.gradebook.schemas.common import PartialUpdate


class CourseCreate(BaseModel):
    name: str = Field(..., example="Introduction to Computer Science")
    code: str = Field(..., example="CS101")
    description: str = Field(..., example="Learn the fundamentals of programming.")
    teacher_id: str
    student_ids: List[str] = []


class CourseUpdate(PartialUpdate):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    student_ids: Optional[List[str]] = None
