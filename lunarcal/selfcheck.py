"""
数据表自检与准确性核对

- check_table: 逐年解码数据表，检查闰月字段与全年天数
- verify_accuracy: 用已知的公历/农历对照日期核对换算结果
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .converter import LunarConverter
from .decoder import leap_month, year_days
from .errors import DataCorruptionError
from .table import LUNAR_INFO, MIN_YEAR

logger = logging.getLogger(__name__)

MIN_FULL_YEAR_DAYS = 353
MAX_FULL_YEAR_DAYS = 385

# (公历日期, 农历月日, 节日)
ACCURACY_CASES = [
    (date(1970, 1, 1), "冬月廿四", None),
    (date(1970, 2, 6), "正月初一", "春节"),
    (date(2024, 2, 9), "腊月三十", "除夕"),
    (date(2024, 9, 17), "八月十五", "中秋节"),
    (date(2025, 7, 25), "闰六月初一", None),
    (date(2026, 2, 13), "腊月廿六", None),
    (date(2026, 2, 16), "腊月廿九", "除夕"),
    (date(2026, 2, 17), "正月初一", "春节"),
    (date(2100, 12, 31), "腊月初一", None),
]


@dataclass(frozen=True)
class CheckResult:
    solar: date
    expected_text: str
    expected_festival: Optional[str]
    actual_text: Optional[str]
    actual_festival: Optional[str]

    @property
    def passed(self) -> bool:
        return self.actual_text == self.expected_text and self.actual_festival == self.expected_festival


def check_table(table: tuple[int, ...] = LUNAR_INFO) -> list[str]:
    """返回发现的问题列表，空列表表示数据表正常。"""
    problems = []
    for year in range(MIN_YEAR, MIN_YEAR + len(table)):
        try:
            leap_month(year, table)
            days = year_days(year, table)
        except DataCorruptionError as e:
            problems.append(str(e))
            continue

        if year > MIN_YEAR and not MIN_FULL_YEAR_DAYS <= days <= MAX_FULL_YEAR_DAYS:
            problems.append(f"{year}年天数异常: {days}")

    if problems:
        logger.error(f"数据表自检发现 {len(problems)} 个问题")
    return problems


def verify_accuracy(converter: LunarConverter | None = None) -> list[CheckResult]:
    """逐条核对 ACCURACY_CASES。"""
    converter = converter or LunarConverter()

    results = []
    for solar, expected_text, expected_festival in ACCURACY_CASES:
        result = converter.convert(solar)
        actual_text = result.lunar.text if result.ok else None
        actual_festival = result.lunar.festival if result.ok else None
        results.append(
            CheckResult(
                solar=solar,
                expected_text=expected_text,
                expected_festival=expected_festival,
                actual_text=actual_text,
                actual_festival=actual_festival,
            )
        )
    return results
