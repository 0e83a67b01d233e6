"""
农历日期结果对象

闰月用 LunarMonth(number, is_leap=True) 表示，number 为其所跟随的正常月份，
不再借用大于 12 的月份数字来区分。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .formatter import format_day, format_month


@dataclass(frozen=True, order=True)
class LunarMonth:
    """农历月份：序号 + 是否闰月。排序时闰 M 月位于 M 月之后、M+1 月之前。"""

    number: int
    is_leap: bool = False

    def __post_init__(self) -> None:
        if self.number < 1 or self.number > 12:
            raise ValueError(f"invalid lunar month: {self.number}")

    @property
    def name(self) -> str:
        return format_month(self.number, self.is_leap)


@dataclass(frozen=True, order=True)
class LunarDate:
    """一次换算的结果，不可变。"""

    year: int
    month: LunarMonth
    day: int
    leap_month: int = 0          # 当年闰几月（年份属性），0 为无闰月

    @property
    def is_leap_month(self) -> bool:
        """该日期是否落在闰月内。"""
        return self.month.is_leap

    @property
    def month_name(self) -> str:
        return self.month.name

    @property
    def day_name(self) -> str:
        return format_day(self.day)

    @property
    def text(self) -> str:
        """月日文本，例如 '正月初三'、'闰六月初一'。"""
        return self.month_name + self.day_name

    @property
    def festival(self) -> Optional[str]:
        from .festival import festival_of

        return festival_of(self)

    def __str__(self) -> str:
        return f"农历{self.year}年{self.text}"
