"""农历换算相关异常"""

from __future__ import annotations


class LunarCalendarError(Exception):
    """农历换算错误基类"""

    pass


class OutOfRangeError(LunarCalendarError):
    """输入日期超出 1970-01-01 ~ 2100-12-31 的可换算范围"""

    pass


class DataCorruptionError(LunarCalendarError):
    """数据表条目解码异常（闰月月份大于 12），说明数据表本身有误"""

    def __init__(self, year: int, raw: int):
        self.year = year
        self.raw = raw
        super().__init__(f"{year}年数据错误, lunarYear: {raw:b}")
