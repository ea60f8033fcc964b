from sqlalchemy import Column, Integer, String, ForeignKey
from app.database import Base

class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True)
    uid = Column("UID_g", String(64), unique=True, nullable=False, index=True)
    name = Column("group_name", String(100), nullable=False)

    fac_id = Column(Integer, ForeignKey("facultees.id"), index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), index=True)
