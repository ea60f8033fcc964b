from sqlalchemy import Column, Integer, String
from app.database import Base

class Discipline(Base):
    __tablename__ = "disciplines"

    id = Column(Integer, primary_key=True)
    disc = Column(String(255), nullable=False)
