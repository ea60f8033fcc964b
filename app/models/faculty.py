from sqlalchemy import Column, Integer, String
from app.database import Base

class Faculty(Base):
    __tablename__ = "facultees"

    id = Column(Integer, primary_key=True)
    name = Column("fac", String(255), nullable=False)
