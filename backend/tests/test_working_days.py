"""근무일 달력(둘째/넷째 토요일, 일요일 휴무) 투영 규칙을 검증하는 테스트입니다."""

from datetime import date, timedelta

import pytest

from app.utils.working_days import (
    WorkingDayCalendar,
    add_working_days,
    is_non_working_saturday,
    is_working_day,
    next_working_day,
    project_slot,
    saturday_ordinal,
    slot_offset,
)


def _saturdays(year: int, month: int):
    day = date(year, month, 1)
    while day.month == month:
        if day.weekday() == 5:
            yield day
        day += timedelta(days=1)


def test_saturday_ordinal_counts_from_first_saturday():
    # 2026-01: 1/3, 1/10, 1/17, 1/24, 1/31
    assert [saturday_ordinal(d) for d in _saturdays(2026, 1)] == [1, 2, 3, 4, 5]
    assert saturday_ordinal(date(2026, 1, 5)) == 0


def test_non_working_saturdays_are_second_and_fourth():
    assert not is_non_working_saturday(date(2026, 1, 3))
    assert is_non_working_saturday(date(2026, 1, 10))
    assert not is_non_working_saturday(date(2026, 1, 17))
    assert is_non_working_saturday(date(2026, 1, 24))
    assert not is_non_working_saturday(date(2026, 1, 31))
    assert not is_non_working_saturday(date(2026, 1, 11))  # Sunday


def test_first_saturday_on_the_first_of_month():
    # 2025-11-01 은 토요일이므로 11/8 이 둘째, 11/22 가 넷째 토요일이다.
    assert saturday_ordinal(date(2025, 11, 1)) == 1
    assert is_non_working_saturday(date(2025, 11, 8))
    assert is_non_working_saturday(date(2025, 11, 22))
    assert not is_non_working_saturday(date(2025, 11, 29))


@pytest.mark.parametrize("year,month", [(2025, 3), (2025, 11), (2026, 1), (2026, 2), (2026, 8)])
def test_non_working_saturday_matches_ordinal_definition(year, month):
    day = date(year, month, 1)
    while day.month == month:
        expected = day.weekday() == 5 and sum(1 for s in _saturdays(year, month) if s <= day) in (2, 4)
        assert is_non_working_saturday(day) is expected
        day += timedelta(days=1)


def test_projection_never_lands_on_day_off():
    anchors = [date(2025, 12, 28) + timedelta(days=i) for i in range(45)]
    for anchor in anchors:
        for offset in range(0, 40):
            result = add_working_days(anchor, offset)
            assert result.weekday() != 6
            assert not is_non_working_saturday(result)
            assert result >= anchor


def test_week_one_day_six_skips_second_saturday_and_sunday():
    # 월요일 시작, 오프셋 5: 토(1/10 둘째 토요일)·일을 건너뛰고 다음 월요일
    assert slot_offset(1, 6) == 5
    assert project_slot(date(2026, 1, 5), 1, 6) == date(2026, 1, 12)


def test_working_saturday_counts_as_a_day():
    # 1/31 은 다섯째 토요일(근무일)
    assert project_slot(date(2026, 1, 26), 1, 6) == date(2026, 1, 31)


def test_week_offset_uses_five_working_days_per_week():
    assert slot_offset(2, 1) == 5
    assert slot_offset(3, 2) == 11
    # 1/5 + 5 근무일 = 1/12, 다시 둘째 주 1일차와 같은 날
    assert project_slot(date(2026, 1, 5), 2, 1) == date(2026, 1, 12)


def test_zero_offset_on_day_off_moves_forward():
    assert add_working_days(date(2026, 1, 10), 0) == date(2026, 1, 12)
    assert add_working_days(date(2026, 1, 4), 0) == date(2026, 1, 5)
    assert add_working_days(date(2026, 1, 3), 0) == date(2026, 1, 3)


def test_next_working_day():
    assert next_working_day(date(2026, 1, 9)) == date(2026, 1, 12)
    assert next_working_day(date(2026, 1, 16)) == date(2026, 1, 17)
    assert is_working_day(date(2026, 1, 17))


def test_custom_saturday_policy():
    every_saturday_off = WorkingDayCalendar(off_saturdays=[1, 2, 3, 4, 5])
    assert every_saturday_off.add_working_days(date(2026, 1, 26), 5) == date(2026, 2, 2)

    saturdays_on = WorkingDayCalendar(off_saturdays=[])
    assert saturdays_on.add_working_days(date(2026, 1, 5), 5) == date(2026, 1, 10)


def test_invalid_slot_numbers_rejected():
    with pytest.raises(ValueError):
        slot_offset(0, 1)
    with pytest.raises(ValueError):
        add_working_days(date(2026, 1, 5), -1)


def test_was_shifted_marks_raw_position_on_day_off():
    calendar = WorkingDayCalendar()
    assert calendar.was_shifted(date(2026, 1, 5), 1, 6)
    assert not calendar.was_shifted(date(2026, 1, 5), 1, 5)
