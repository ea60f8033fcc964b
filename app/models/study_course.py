from sqlalchemy import Column, Integer, String
from app.database import Base

# 年級（1 курс, 2 курс…），不是課程
class StudyCourse(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    name = Column("course", String(50), nullable=False)
