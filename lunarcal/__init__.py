"""公历转农历（1970-2100），附传统节日与农历月日写法。"""

from __future__ import annotations

from .converter import ConversionResult, LunarConverter, convert, get_lunar_date
from .errors import DataCorruptionError, LunarCalendarError, OutOfRangeError
from .festival import get_holiday, get_lunar_festival
from .models import LunarDate, LunarMonth

__all__ = [
    "ConversionResult",
    "DataCorruptionError",
    "LunarCalendarError",
    "LunarConverter",
    "LunarDate",
    "LunarMonth",
    "OutOfRangeError",
    "convert",
    "get_holiday",
    "get_lunar_date",
    "get_lunar_festival",
]
