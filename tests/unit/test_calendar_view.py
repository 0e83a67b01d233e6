"""
月历视图与自检单元测试
"""

from __future__ import annotations

from datetime import date

import pytest

from lunarcal.calendar_view import DayCell, build_month, weeks
from lunarcal.converter import LunarConverter
from lunarcal.selfcheck import ACCURACY_CASES, check_table, verify_accuracy


@pytest.mark.unit
class TestBuildMonth:
    """测试月历生成。"""

    def test_days_in_month(self, converter: LunarConverter) -> None:
        cells = build_month(2026, 2, converter)

        assert len(cells) == 28
        assert cells[0].solar == date(2026, 2, 1)
        assert cells[-1].solar == date(2026, 2, 28)

    def test_labels(self, converter: LunarConverter) -> None:
        """测试节日优先、初一显示月名、其余显示日名。"""
        cells = build_month(2026, 2, converter)

        assert cells[0].label == "十四"
        assert cells[15].label == "除夕"
        assert cells[16].label == "春节"
        assert cells[17].label == "初二"

    def test_month_name_on_first_day(self, converter: LunarConverter) -> None:
        cells = build_month(2026, 3, converter)
        assert cells[18].label == "二月"

    def test_solar_holiday(self, converter: LunarConverter) -> None:
        """测试 1970-01-01 显示元旦，农历仍为冬月廿四。"""
        cells = build_month(1970, 1, converter)

        assert cells[0].label == "元旦"
        assert cells[0].lunar.day_name == "廿四"
        assert cells[7].label == "腊月"

    def test_out_of_range_month(self, converter: LunarConverter) -> None:
        cells = build_month(1969, 12, converter)
        assert all(cell.lunar is None and cell.label == "" for cell in cells)


@pytest.mark.unit
class TestWeeks:
    """测试按周排版。"""

    def test_monday_first(self, converter: LunarConverter) -> None:
        """2026-02-01 是周日。"""
        rows = weeks(build_month(2026, 2, converter))

        assert len(rows) == 5
        assert all(len(row) == 7 for row in rows)
        assert rows[0][:6] == [None] * 6
        assert rows[0][6].solar == date(2026, 2, 1)
        assert rows[-1][-1] is None

    def test_empty(self) -> None:
        assert weeks([]) == []

    def test_full_week(self) -> None:
        # 2024-01-01 是周一
        cells = [DayCell(solar=date(2024, 1, d)) for d in range(1, 8)]
        assert weeks(cells) == [cells]


@pytest.mark.unit
class TestSelfCheck:
    """测试数据表自检与准确性核对。"""

    def test_builtin_table_clean(self) -> None:
        assert check_table() == []

    def test_corrupt_table(self, corrupt_table) -> None:
        problems = check_table(corrupt_table)

        assert len(problems) == 1
        assert "1970年数据错误" in problems[0]

    def test_bad_year_length(self, patched_table) -> None:
        """测试全小月且无闰月的年份只有 348 天。"""
        problems = check_table(patched_table(y1970=0x00000))
        assert problems == ["1970年天数异常: 348"]

    def test_accuracy_cases_pass(self, converter: LunarConverter) -> None:
        results = verify_accuracy(converter)

        assert len(results) == len(ACCURACY_CASES)
        assert all(result.passed for result in results)
