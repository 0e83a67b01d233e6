"""
农历数据表（1969-2100）

每个农历年用一个整数编码：
- 低 4 位: 闰月月份（0 表示无闰月，0xF 同样视为无闰月）
- bit 15..4: 正月至腊月的大小月（1 -> 30 天，0 -> 29 天）
- bit 16 (0x10000): 闰月大小（1 -> 30 天，0 -> 29 天），仅在有闰月时有效

1969 年只截取了最后 35 天（冬月 6 天 + 腊月 29 天），作为推算起点。
"""

from __future__ import annotations

from datetime import date, datetime

from .errors import OutOfRangeError

MIN_YEAR = 1969
MAX_YEAR = 2100

# 公历 1970-01-01 即农历 1969 年冬月廿四
MIN_DATE_MONTH = 11
MIN_DATE_DAY = 24
MIN_YEAR_DAYS = 35
MIN_MONTH_DAYS = 6

EPOCH_DATE = date(MIN_YEAR + 1, 1, 1)

# 本地时间边界：公历 2100-12-31 23:59:59 即农历 2100 年腊月初一
MIN_SOLAR = datetime(MIN_YEAR + 1, 1, 1, 0, 0, 0)
MAX_SOLAR = datetime(MAX_YEAR, 12, 31, 23, 59, 59)

LUNAR_INFO: tuple[int, ...] = (
    0x00020,  # 1969
    # 1970-1979
    0x096D0, 0x04DD5, 0x04AD0, 0x0A4D0, 0x0D4D4, 0x0D250, 0x0D558, 0x0B540, 0x0B6A0, 0x195A6,
    # 1980-1989
    0x095B0, 0x049B0, 0x0A974, 0x0A4B0, 0x0B27A, 0x06A50, 0x06D40, 0x0AF46, 0x0AB60, 0x09570,
    # 1990-1999
    0x04AF5, 0x04970, 0x064B0, 0x074A3, 0x0EA50, 0x06B58, 0x05AC0, 0x0AB60, 0x096D5, 0x092E0,
    # 2000-2009
    0x0C960, 0x0D954, 0x0D4A0, 0x0DA50, 0x07552, 0x056A0, 0x0ABB7, 0x025D0, 0x092D0, 0x0CAB5,
    # 2010-2019
    0x0A950, 0x0B4A0, 0x0BAA4, 0x0AD50, 0x055D9, 0x04BA0, 0x0A5B0, 0x15176, 0x052B0, 0x0A930,
    # 2020-2029
    0x07954, 0x06AA0, 0x0AD50, 0x05B52, 0x04B60, 0x0A6E6, 0x0A4E0, 0x0D260, 0x0EA65, 0x0D530,
    # 2030-2039
    0x05AA0, 0x076A3, 0x096D0, 0x026FB, 0x04AD0, 0x0A4D0, 0x1D0B6, 0x0D250, 0x0D520, 0x0DD45,
    # 2040-2049
    0x0B5A0, 0x056D0, 0x055B2, 0x049B0, 0x0A577, 0x0A4B0, 0x0AA50, 0x1B255, 0x06D20, 0x0ADA0,
    # 2050-2059
    0x14B63, 0x09370, 0x049F8, 0x04970, 0x064B0, 0x168A6, 0x0EA50, 0x06AA0, 0x1A6C4, 0x0AAE0,
    # 2060-2069
    0x092E0, 0x0D2E3, 0x0C960, 0x0D557, 0x0D4A0, 0x0DA50, 0x05D55, 0x056A0, 0x0A6D0, 0x055D4,
    # 2070-2079
    0x052D0, 0x0A9B8, 0x0A950, 0x0B4A0, 0x0B6A6, 0x0AD50, 0x055A0, 0x0ABA4, 0x0A5B0, 0x052B0,
    # 2080-2089
    0x0B273, 0x06930, 0x07337, 0x06AA0, 0x0AD50, 0x14B55, 0x04B60, 0x0A570, 0x054E4, 0x0D160,
    # 2090-2099
    0x0E968, 0x0D520, 0x0DAA0, 0x16AA6, 0x056D0, 0x04AE0, 0x0A9D4, 0x0A2D0, 0x0D150, 0x0F252,
    # 2100
    0x0D520,
)


def year_data(year: int, table: tuple[int, ...] = LUNAR_INFO) -> int:
    """返回某农历年的编码值，超出数据表范围时抛出 OutOfRangeError。"""
    if year < MIN_YEAR or year > MIN_YEAR + len(table) - 1:
        raise OutOfRangeError(f"农历年份超出数据表范围: {year} (有效范围 {MIN_YEAR}-{MAX_YEAR})")
    return table[year - MIN_YEAR]
