"""
月历视图

生成某个公历月每天的农历信息，供命令行或前端按周排版。
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .converter import LunarConverter
from .festival import SOLAR_HOLIDAYS
from .models import LunarDate


@dataclass(frozen=True)
class DayCell:
    solar: date
    lunar: Optional[LunarDate] = None
    festival: Optional[str] = None

    @property
    def label(self) -> str:
        """节日优先，初一显示月名，其余显示日名。"""
        if self.festival:
            return self.festival
        if self.lunar is None:
            return ""
        if self.lunar.day == 1:
            return self.lunar.month_name
        return self.lunar.day_name


def build_month(year: int, month: int, converter: LunarConverter | None = None) -> list[DayCell]:
    """返回公历 year 年 month 月每一天的 DayCell，超出换算范围的日子 lunar 为 None。"""
    converter = converter or LunarConverter()
    _, last_day = calendar.monthrange(year, month)

    cells = []
    for day in range(1, last_day + 1):
        solar = date(year, month, day)
        result = converter.convert(solar)
        if not result.ok:
            cells.append(DayCell(solar=solar))
            continue
        festival = result.lunar.festival or SOLAR_HOLIDAYS.get((month, day))
        cells.append(DayCell(solar=solar, lunar=result.lunar, festival=festival))
    return cells


def weeks(cells: list[DayCell]) -> list[list[Optional[DayCell]]]:
    """按周一开头分行，首尾不足一周的位置用 None 补齐。"""
    if not cells:
        return []

    rows: list[list[Optional[DayCell]]] = []
    row: list[Optional[DayCell]] = [None] * cells[0].solar.weekday()
    for cell in cells:
        row.append(cell)
        if len(row) == 7:
            rows.append(row)
            row = []
    if row:
        row.extend([None] * (7 - len(row)))
        rows.append(row)
    return rows
