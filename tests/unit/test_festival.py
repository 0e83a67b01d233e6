"""
Festival 模块单元测试

测试传统节日查询与除夕的大小月判断。
"""

from __future__ import annotations

from datetime import date

import pytest

from lunarcal.converter import LunarConverter
from lunarcal.decoder import month_days
from lunarcal.errors import OutOfRangeError
from lunarcal.festival import festival_of, get_holiday, get_lunar_festival
from lunarcal.models import LunarDate, LunarMonth


@pytest.mark.unit
class TestStaticFestivals:
    """测试固定日期的节日。"""

    @pytest.mark.parametrize(
        "month,day,name",
        [
            (1, 1, "春节"),
            (1, 15, "元宵节"),
            (5, 5, "端午节"),
            (7, 7, "七夕"),
            (8, 15, "中秋节"),
            (9, 9, "重阳节"),
            (12, 8, "腊八节"),
        ],
    )
    def test_festival(self, month: int, day: int, name: str) -> None:
        assert get_lunar_festival(2024, month, day) == name

    @pytest.mark.parametrize("month,day", [(1, 2), (3, 3), (8, 16), (12, 1)])
    def test_no_festival(self, month: int, day: int) -> None:
        assert get_lunar_festival(2024, month, day) is None


@pytest.mark.unit
class TestNewYearsEve:
    """测试除夕：腊月最后一天。"""

    def test_small_last_month(self) -> None:
        """测试腊月为小月时廿九是除夕。"""
        assert month_days(2025, 12) == 29
        assert get_lunar_festival(2025, 12, 29) == "除夕"

    def test_big_last_month(self) -> None:
        """测试腊月为大月时廿九不是除夕，三十才是。"""
        assert month_days(2023, 12) == 30
        assert get_lunar_festival(2023, 12, 29) is None
        assert get_lunar_festival(2023, 12, 30) == "除夕"

    def test_first_year(self) -> None:
        assert get_lunar_festival(1969, 12, 29) == "除夕"

    def test_year_outside_table(self) -> None:
        """测试数据表之外的年份无法判断腊月大小。"""
        with pytest.raises(OutOfRangeError):
            get_lunar_festival(2101, 12, 29)


@pytest.mark.unit
class TestFestivalOf:
    """测试换算结果上的节日。"""

    def test_regular_month(self) -> None:
        assert festival_of(LunarDate(2052, LunarMonth(8), 15, 8)) == "中秋节"

    def test_leap_month_has_no_festival(self) -> None:
        """测试闰八月十五不是中秋节。"""
        assert festival_of(LunarDate(2052, LunarMonth(8, is_leap=True), 15, 8)) is None

    def test_property(self, converter: LunarConverter) -> None:
        assert converter.convert(date(2026, 2, 16)).lunar.festival == "除夕"
        assert converter.convert(date(2026, 2, 18)).lunar.festival is None


@pytest.mark.unit
class TestGetHoliday:
    """测试农历 + 公历节日合并查询。"""

    def test_lunar_first(self, converter: LunarConverter) -> None:
        assert get_holiday(date(2026, 2, 17), converter) == "春节"

    def test_solar_holiday(self, converter: LunarConverter) -> None:
        assert get_holiday(date(2026, 10, 1), converter) == "国庆节"
        assert get_holiday(date(2025, 1, 1), converter) == "元旦"

    def test_solar_holiday_out_of_lunar_range(self, converter: LunarConverter) -> None:
        """测试超出农历范围时仍返回公历节日。"""
        assert get_holiday(date(1969, 12, 25), converter) == "圣诞节"

    def test_no_holiday(self, converter: LunarConverter) -> None:
        assert get_holiday(date(2026, 2, 13), converter) is None

    def test_default_converter(self) -> None:
        assert get_holiday(date(2024, 9, 17)) == "中秋节"
