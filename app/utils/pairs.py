from dataclasses import dataclass
from typing import Dict

from app.errors import ValidationError


@dataclass(frozen=True)
class PairSlot:
    number: int
    start: str
    end: str

    @property
    def label(self) -> str:
        return f"{self.number} пара"

    def as_dict(self) -> dict:
        return {"number": self.number, "label": self.label, "start": self.start, "end": self.end}


# 節次表（鐘點），依節次排序
PAIR_SLOTS: Dict[int, PairSlot] = {
    slot.number: slot
    for slot in (
        PairSlot(1, "09:00", "10:35"),
        PairSlot(2, "10:45", "12:20"),
        PairSlot(3, "13:00", "14:35"),
        PairSlot(4, "14:45", "16:20"),
        PairSlot(5, "16:30", "18:05"),
        PairSlot(6, "18:15", "19:50"),
        PairSlot(7, "20:00", "21:35"),
    )
}


def pair_slot(number) -> PairSlot:
    """
    3 -> PairSlot(3, "13:00", "14:35")
    不在節次表內（0、99、None…）一律 ValidationError
    """
    try:
        key = int(number)
    except (TypeError, ValueError):
        raise ValidationError("Unknown pair slot", pair=number)
    slot = PAIR_SLOTS.get(key)
    if slot is None:
        raise ValidationError("Unknown pair slot", pair=number)
    return slot
