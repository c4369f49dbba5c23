# File: src/gradebook/models/user.py
import enum

from pydantic import NaiveDatetime
from sqlalchemy import DateTime, Enum as SQLAlchemyEnum
from sqlmodel import SQLModel, Field, Column

from src.gradebook.utils.time import utc_now


class UserRole(str, enum.Enum):
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"
    ADMIN = "ADMIN"


class User(SQLModel, table=True):
    __tablename__ = "user"
    __table_args__ = {"extend_existing": True}

    id: str = Field(primary_key=True)
    email: str = Field(index=True)
    name: str
    role: UserRole = Field(default=UserRole.STUDENT, sa_column=Column(SQLAlchemyEnum(UserRole)))
    created_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)
    updated_at: NaiveDatetime = Field(default_factory=utc_now, sa_type=DateTime)
