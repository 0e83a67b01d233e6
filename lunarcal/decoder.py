"""
农历年数据解码

从数据表的单个编码值中解出：闰月月份、闰月天数、各月天数、全年天数。
全部为纯函数，`table` 参数默认使用内置数据表，便于单独替换测试。
"""

from __future__ import annotations

import logging

from .errors import DataCorruptionError
from .models import LunarMonth
from .table import LUNAR_INFO, MIN_DATE_MONTH, MIN_MONTH_DAYS, MIN_YEAR, MIN_YEAR_DAYS, year_data

logger = logging.getLogger(__name__)

LEAP_SENTINEL = 0xF
LEAP_SIZE_BIT = 0x10000


def leap_month(year: int, table: tuple[int, ...] = LUNAR_INFO) -> int:
    """闰哪个月，0 表示当年无闰月。"""
    data = year_data(year, table)
    month = data & 0xF
    if month == LEAP_SENTINEL:
        month = 0
    if month > 12:
        # 闰月月份不可能大于 12，数据表条目有误
        logger.error(f"{year}年数据错误: {data:#x}")
        raise DataCorruptionError(year, data)
    return month


def leap_month_days(year: int, table: tuple[int, ...] = LUNAR_INFO) -> int:
    """闰月天数，无闰月返回 0。"""
    if leap_month(year, table) == 0:
        return 0
    return 30 if (year_data(year, table) & LEAP_SIZE_BIT) else 29


def month_days(year: int, month: int, table: tuple[int, ...] = LUNAR_INFO) -> int:
    """正常（非闰）月的天数。"""
    if month < 1 or month > 12:
        raise ValueError(f"invalid lunar month: {month}")
    if year == MIN_YEAR and month == MIN_DATE_MONTH:
        # 1969 年冬月只有 6 天在范围内
        return MIN_MONTH_DAYS
    return 30 if (year_data(year, table) & (0x10000 >> month)) else 29


def year_days(year: int, table: tuple[int, ...] = LUNAR_INFO) -> int:
    """农历年总天数（含闰月）。"""
    if year == MIN_YEAR:
        return MIN_YEAR_DAYS

    data = year_data(year, table)
    days = 348
    bit = 0x8000
    for _ in range(12):
        if data & bit:
            days += 1
        bit >>= 1
    return days + leap_month_days(year, table)


def month_lengths(year: int, table: tuple[int, ...] = LUNAR_INFO) -> list[tuple[LunarMonth, int]]:
    """按先后顺序列出当年各月（含闰月）及其天数。"""
    leap = leap_month(year, table)
    first = MIN_DATE_MONTH if year == MIN_YEAR else 1

    months: list[tuple[LunarMonth, int]] = []
    for number in range(first, 13):
        months.append((LunarMonth(number), month_days(year, number, table)))
        if number == leap:
            months.append((LunarMonth(number, is_leap=True), leap_month_days(year, table)))
    return months
