"""
传统节日

农历节日按 (月, 日) 查表；除夕取腊月最后一天，需按当年腊月大小判断是廿九还是三十。
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Optional, Union

from .decoder import month_days
from .errors import OutOfRangeError

if TYPE_CHECKING:
    from .converter import LunarConverter
    from .models import LunarDate

LUNAR_FESTIVALS = {
    (1, 1): "春节",
    (1, 15): "元宵节",
    (5, 5): "端午节",
    (7, 7): "七夕",
    (8, 15): "中秋节",
    (9, 9): "重阳节",
    (12, 8): "腊八节",
}

NEW_YEARS_EVE = "除夕"

SOLAR_HOLIDAYS = {
    (1, 1): "元旦",
    (5, 1): "劳动节",
    (10, 1): "国庆节",
    (12, 25): "圣诞节",
}


def get_lunar_festival(year: int, month: int, day: int) -> Optional[str]:
    """返回农历 year 年 month 月 day 日对应的节日名，没有则返回 None。"""
    festival = LUNAR_FESTIVALS.get((month, day))
    if festival is not None:
        return festival
    if month == 12 and day == month_days(year, 12):
        return NEW_YEARS_EVE
    return None


def festival_of(lunar: LunarDate) -> Optional[str]:
    """换算结果对应的节日，闰月里没有节日。"""
    if lunar.month.is_leap:
        return None
    return get_lunar_festival(lunar.year, lunar.month.number, lunar.day)


def get_holiday(
    value: Union[date, datetime, int, float],
    converter: Optional[LunarConverter] = None,
) -> Optional[str]:
    """农历节日优先，其次公历节日，都没有返回 None。"""
    if converter is None:
        from .converter import default_converter

        converter = default_converter()

    result = converter.convert(value)
    if result.ok:
        holiday = festival_of(result.lunar)
        if holiday is not None:
            return holiday

    try:
        solar = converter.to_local(value)
    except OutOfRangeError:
        return None
    return SOLAR_HOLIDAYS.get((solar.month, solar.day))
