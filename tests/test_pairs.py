import pytest

from app.errors import ValidationError
from app.utils.pairs import PAIR_SLOTS, pair_slot


def test_pair_slot_lookup():
    slot = pair_slot(1)
    assert slot.label == "1 пара"
    assert slot.as_dict() == {"number": 1, "label": "1 пара", "start": "09:00", "end": "10:35"}


def test_pair_slots_are_ordered_by_time():
    numbers = sorted(PAIR_SLOTS)
    assert numbers == list(range(1, len(numbers) + 1))
    starts = [PAIR_SLOTS[n].start for n in numbers]
    assert starts == sorted(starts)


@pytest.mark.parametrize("number", [0, 99, -1, None, "x"])
def test_pair_slot_out_of_range(number):
    with pytest.raises(ValidationError):
        pair_slot(number)
