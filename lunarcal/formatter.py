"""
农历月、日的传统写法

- 月: 正、二 … 十、冬、腊，闰月前加「闰」
- 日: 初一 … 初十、十一 … 二十、廿一 … 三十
"""

from __future__ import annotations

LUNAR_MONTH_NAMES = ["正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "冬", "腊"]
LUNAR_DAY_PREFIXES = ["初", "十", "廿", "卅"]
NUMBERS = ["一", "二", "三", "四", "五", "六", "七", "八", "九", "十"]

# 整十的日子用整词，不拼个位
LUNAR_ROUND_DAYS = {10: "初十", 20: "二十", 30: "三十"}

LEAP_PREFIX = "闰"


def format_month(number: int, is_leap: bool = False) -> str:
    """农历月名，例如 format_month(6, True) -> '闰六月'。"""
    if number < 1 or number > len(LUNAR_MONTH_NAMES):
        raise ValueError(f"invalid lunar month: {number}")
    name = f"{LUNAR_MONTH_NAMES[number - 1]}月"
    return f"{LEAP_PREFIX}{name}" if is_leap else name


def format_day(day: int) -> str:
    """农历日名，例如 format_day(11) -> '十一'。"""
    if day < 1 or day > 30:
        raise ValueError(f"invalid lunar day: {day}")
    if day in LUNAR_ROUND_DAYS:
        return LUNAR_ROUND_DAYS[day]
    tens, ones = divmod(day, 10)
    return LUNAR_DAY_PREFIXES[tens] + NUMBERS[ones - 1]


def format_date(month: int, day: int, is_leap: bool = False) -> str:
    """月日合写，例如 '正月初三'、'闰四月初一'。"""
    return format_month(month, is_leap) + format_day(day)
