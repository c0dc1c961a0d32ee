"""근무일 달력 계산 유틸리티.

일요일과 휴무 토요일(기본: 매월 둘째/넷째 토요일)을 건너뛰며 차수 시작일 기준으로
주차/일차 템플릿 슬롯을 실제 날짜로 투영한다.

토요일 서수는 달력 화면의 주 구분이 아니라 그 달 첫 토요일로부터의 7일 간격으로만
계산한다: ``(date.day - first_saturday.day) // 7 + 1``.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from app.config import settings

SATURDAY = 5
SUNDAY = 6
WORKING_DAYS_PER_WEEK = 5


def first_saturday(day: date) -> date:
    first = day.replace(day=1)
    return first + timedelta(days=(SATURDAY - first.weekday()) % 7)


def saturday_ordinal(day: date) -> int:
    """해당 월에서 몇 번째 토요일인지 반환한다. 토요일이 아니면 0."""
    if day.weekday() != SATURDAY:
        return 0
    return (day.day - first_saturday(day).day) // 7 + 1


def slot_offset(week_number: int, day_number: int) -> int:
    if week_number < 1 or day_number < 1:
        raise ValueError("week_number and day_number are 1-based")
    return (week_number - 1) * WORKING_DAYS_PER_WEEK + (day_number - 1)


class WorkingDayCalendar:
    """휴무 토요일 정책을 묶은 근무일 계산기."""

    def __init__(self, off_saturdays: Optional[Iterable[int]] = None):
        if off_saturdays is None:
            off_saturdays = settings.NON_WORKING_SATURDAYS
        self.off_saturdays = frozenset(int(n) for n in off_saturdays)

    def is_non_working_saturday(self, day: date) -> bool:
        return saturday_ordinal(day) in self.off_saturdays

    def is_working_day(self, day: date) -> bool:
        return day.weekday() != SUNDAY and not self.is_non_working_saturday(day)

    def next_working_day(self, day: date) -> date:
        nxt = day + timedelta(days=1)
        while not self.is_working_day(nxt):
            nxt += timedelta(days=1)
        return nxt

    def add_working_days(self, anchor: date, offset: int) -> date:
        if offset < 0:
            raise ValueError("offset must be >= 0")
        current = anchor
        remaining = offset
        while remaining > 0:
            current += timedelta(days=1)
            if self.is_working_day(current):
                remaining -= 1
        # offset 0 이면서 시작일 자체가 휴무일인 경우
        if not self.is_working_day(current):
            current = self.next_working_day(current)
        return current

    def project_slot(self, anchor: date, week_number: int, day_number: int) -> date:
        return self.add_working_days(anchor, slot_offset(week_number, day_number))

    def was_shifted(self, anchor: date, week_number: int, day_number: int) -> bool:
        # 7일 단위 원본 위치가 휴무 토요일이었는지 표시용으로만 사용한다.
        raw = anchor + timedelta(days=(week_number - 1) * 7 + (day_number - 1))
        return self.is_non_working_saturday(raw)


def default_calendar() -> WorkingDayCalendar:
    return WorkingDayCalendar()


def is_non_working_saturday(day: date) -> bool:
    return default_calendar().is_non_working_saturday(day)


def is_working_day(day: date) -> bool:
    return default_calendar().is_working_day(day)


def next_working_day(day: date) -> date:
    return default_calendar().next_working_day(day)


def add_working_days(anchor: date, offset: int) -> date:
    return default_calendar().add_working_days(anchor, offset)


def project_slot(anchor: date, week_number: int, day_number: int) -> date:
    return default_calendar().project_slot(anchor, week_number, day_number)
