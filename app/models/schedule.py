from sqlalchemy import Column, Integer, String, Date
from app.database import Base

class Schedule(Base):
    __tablename__ = "schedule"

    id = Column(Integer, primary_key=True)
    group_uid = Column("UID_g", String(64), nullable=False, index=True)

    pair_date = Column(Date, nullable=False, index=True)
    pair = Column(Integer, nullable=False)
    pair_type = Column(String(50))

    # 不設 FK：dimension 缺資料時要在組裝階段被發現
    disc_id = Column(Integer, nullable=False)
    room_id = Column(Integer, nullable=False)
    teacher_id = Column(Integer, nullable=False)
