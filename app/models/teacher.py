from sqlalchemy import Column, Integer, String
from app.database import Base

class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True)
    teacher = Column(String(255), nullable=False)
