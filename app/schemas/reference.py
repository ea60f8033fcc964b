from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class FacultyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str


class StudyCourseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str


class GroupOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    uid: str
    name: str
    fac_id: Optional[int] = None
    course_id: Optional[int] = None


class UpdateDateOut(BaseModel):
    update_date: Optional[datetime] = None
