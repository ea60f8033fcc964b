from sqlalchemy import Column, Integer, DateTime
from app.database import Base

# 課表資料最後一次匯入的時間
class UpdateInfo(Base):
    __tablename__ = "updates"

    id = Column(Integer, primary_key=True)
    update_date = Column(DateTime, nullable=False)
