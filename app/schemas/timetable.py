from datetime import date, datetime
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ScheduleEntry(BaseModel):
    """資料庫讀出的原始課表列（外鍵尚未展開）"""
    model_config = ConfigDict(frozen=True)

    id: int
    group_identifier: str
    date: Union[datetime, date]
    pair_slot: int
    pair_type: Optional[str] = None
    discipline_id: int
    room_id: int
    teacher_id: int


class PairSlotOut(BaseModel):
    number: int
    label: str
    start: str
    end: str


class EnrichedEntry(BaseModel):
    """
    回給前端的課表項目。
    屬性名稱是內部用的；輸出 JSON 沿用舊前端的欄位名（pair / pair_date / pair_first …）。
    """
    model_config = ConfigDict(populate_by_name=True)

    pair_slot_display: PairSlotOut = Field(alias="pair")
    date: str = Field(alias="pair_date")
    pair_type: Optional[str] = None
    is_first_of_day: bool = Field(alias="pair_first")
    discipline_name: str = Field(alias="disciplines")
    room_name: str = Field(alias="room")
    teacher_name: str = Field(alias="teacher")
    sequence_index: int = Field(alias="id")
