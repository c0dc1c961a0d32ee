"""차수 시간표 CSV(행=일차, 열=주차) 파싱 유틸리티.

엑셀에서 내보낸 CSV는 한 셀의 여러 줄이 별도 행(연속 행)으로 쪼개져 들어오는 경우가
많다. ``Day N`` 표식이 없는 행은 직전 일차의 연속 행으로 보고 열별로 ``<br>`` 로
이어 붙인다.
"""

from __future__ import annotations

import csv
import io
import re
from typing import Any, Dict, List, Sequence

LINE_BREAK = "<br>"
DAY_MARKER = re.compile(r"^Day\s+\d+", re.IGNORECASE)
_DAY_NUMBER = re.compile(r"(\d+)")


class ScheduleFormatError(ValueError):
    pass


def read_csv_rows(text: str) -> List[List[str]]:
    return [list(row) for row in csv.reader(io.StringIO(text.strip()))]


def _cell(row: Sequence[Any], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index]).strip()


def _find_header(rows: Sequence[Sequence[Any]]) -> int:
    for index, row in enumerate(rows):
        if any("week" in str(cell or "").lower() for cell in row):
            return index
    raise ScheduleFormatError("시간표에서 Week 헤더 행을 찾을 수 없습니다.")


def merge_schedule_rows(rows: Sequence[Sequence[Any]]) -> List[Dict[str, str]]:
    header_index = _find_header(rows)
    headers = [_cell(rows[header_index], i) for i in range(len(rows[header_index]))]

    merged: List[Dict[str, str]] = []
    current: Dict[str, str] | None = None
    for row in rows[header_index + 1:]:
        if not row:
            continue
        if DAY_MARKER.match(_cell(row, 0)):
            current = {header: _cell(row, i) for i, header in enumerate(headers)}
            merged.append(current)
            continue
        if current is None or not any(_cell(row, i) for i in range(len(row))):
            continue
        for i, header in enumerate(headers):
            content = _cell(row, i)
            if not content:
                continue
            if current[header]:
                current[header] += LINE_BREAK + content
            else:
                current[header] = content
    return merged


def parse_schedule_csv(data: str | Sequence[Sequence[Any]]) -> List[Dict[str, str]]:
    if isinstance(data, str):
        rows = read_csv_rows(data)
    elif isinstance(data, (list, tuple)):
        rows = [list(row) for row in data]
    else:
        raise ScheduleFormatError("CSV 데이터 형식이 올바르지 않습니다.")
    return merge_schedule_rows(rows)


def day_number_of(label: str, fallback: int) -> int:
    match = _DAY_NUMBER.search(label or "")
    return int(match.group(1)) if match else fallback


def rows_to_week_schedule(merged: Sequence[Dict[str, str]]) -> List[Dict[str, Any]]:
    """병합된 일차 행을 주차별 ``{week, label, days: [{day, content}]}`` 목록으로 피벗한다."""
    if not merged:
        return []
    columns = list(merged[0].keys())
    day_column, week_columns = columns[0], columns[1:]

    weeks: List[Dict[str, Any]] = []
    for week_index, label in enumerate(week_columns, start=1):
        days = []
        for row_index, row in enumerate(merged, start=1):
            content = (row.get(label) or "").strip()
            if not content:
                continue
            day = day_number_of(row.get(day_column, ""), row_index)
            if day < 1:
                raise ScheduleFormatError(f"일차 번호는 1 이상이어야 합니다: {row.get(day_column)}")
            days.append({"day": day, "content": content})
        if days:
            weeks.append({"week": week_index, "label": label, "days": days})
    return weeks


def split_sessions(content: str) -> List[str]:
    return [part.strip() for part in (content or "").split(LINE_BREAK) if part.strip()]
