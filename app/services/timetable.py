# app/services/timetable.py
from __future__ import annotations

import logging
import threading
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Iterable, List, Optional, Protocol, Tuple
from zoneinfo import ZoneInfo

from app.errors import IntegrityError, NotFoundError, TransientStoreError, ValidationError
from app.schemas.timetable import EnrichedEntry, PairSlotOut, ScheduleEntry
from app.utils.dates import DateFormat, calendar_day, format_date
from app.utils.pairs import pair_slot

logger = logging.getLogger("app.timetable")

Names = Tuple[str, str, str]


class DimensionLookup(Protocol):
    def lookup_discipline(self, discipline_id: int) -> str: ...
    def lookup_room(self, room_id: int) -> str: ...
    def lookup_teacher(self, teacher_id: int) -> str: ...


class TimetableAssembler:
    """
    原始課表列 -> 前端可直接顯示的課表。

    - 每一列依序查 discipline -> room -> teacher
    - concurrency > 1 時跨列並行，但輸出永遠照輸入順序
    - pair_first 跟「輸入序列的前一列」比日期，不重新排序
    - 任一 lookup 找不到 -> IntegrityError，不回部分結果
    """

    def __init__(
        self,
        repository: DimensionLookup,
        tz: ZoneInfo,
        concurrency: int = 1,
        timeout: Optional[float] = None,
    ):
        self._repository = repository
        self._tz = tz
        self._concurrency = max(1, int(concurrency))
        self._timeout = timeout

    def assemble(
        self,
        entries: Iterable[ScheduleEntry],
        mode: DateFormat = DateFormat.ISO_DATETIME,
    ) -> List[EnrichedEntry]:
        entries = list(entries)
        if not entries:
            return []

        names = self._resolve_all(entries)

        out: List[EnrichedEntry] = []
        prev_day = None
        for index, (entry, (discipline, room, teacher)) in enumerate(zip(entries, names)):
            day = calendar_day(entry.date)
            out.append(
                EnrichedEntry(
                    pair_slot_display=self._pair_display(entry),
                    date=format_date(entry.date, mode, self._tz),
                    pair_type=entry.pair_type,
                    is_first_of_day=index == 0 or day != prev_day,
                    discipline_name=discipline,
                    room_name=room,
                    teacher_name=teacher,
                    sequence_index=index,
                )
            )
            prev_day = day
        return out

    @staticmethod
    def _pair_display(entry: ScheduleEntry) -> PairSlotOut:
        try:
            slot = pair_slot(entry.pair_slot)
        except ValidationError as e:
            raise IntegrityError(
                "Schedule row has an unknown pair slot", entry_id=entry.id, pair=entry.pair_slot
            ) from e
        return PairSlotOut(**slot.as_dict())

    def _resolve(self, entry: ScheduleEntry, abort: Optional[threading.Event] = None) -> Names:
        lookups = (
            (self._repository.lookup_discipline, entry.discipline_id),
            (self._repository.lookup_room, entry.room_id),
            (self._repository.lookup_teacher, entry.teacher_id),
        )
        names = []
        try:
            for lookup, key in lookups:
                if abort is not None and abort.is_set():
                    raise TransientStoreError("Timetable assembly aborted", entry_id=entry.id)
                names.append(lookup(key))
        except NotFoundError as e:
            raise IntegrityError(
                "Schedule row references a missing dimension row",
                entry_id=entry.id,
                group=entry.group_identifier,
                **e.context,
            ) from e
        return tuple(names)

    def _resolve_all(self, entries: List[ScheduleEntry]) -> List[Names]:
        # 沒有 timeout 才能在呼叫端 thread 直接跑；有 timeout 一律進 pool 才能用 wait() 計時
        if self._timeout is None and (self._concurrency == 1 or len(entries) == 1):
            return [self._resolve(e) for e in entries]

        abort = threading.Event()
        executor = ThreadPoolExecutor(
            max_workers=min(self._concurrency, len(entries)),
            thread_name_prefix="timetable",
        )
        futures = []
        try:
            futures = [executor.submit(self._resolve, e, abort) for e in entries]
            done, pending = wait(futures, timeout=self._timeout, return_when=FIRST_EXCEPTION)
            if pending:
                # 先看是否有 lookup 失敗；沒有就是逾時
                for f in futures:
                    if f in done and f.exception() is not None:
                        raise f.exception()
                raise TransientStoreError(
                    "Timetable assembly timed out", timeout=self._timeout, pending=len(pending)
                )
            # 依輸入順序收結果；第一個失敗的 entry 會在這裡拋出
            return [f.result() for f in futures]
        except Exception:
            # 還沒開始的取消；執行中的在下一個 lookup 前停下
            abort.set()
            for f in futures:
                f.cancel()
            raise
        finally:
            # 等 worker 收完，回應之後不再有 lookup 佔用 pool
            executor.shutdown(wait=True, cancel_futures=True)
