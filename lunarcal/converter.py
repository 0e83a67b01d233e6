"""
公历 -> 农历换算

以公历 1970-01-01（农历 1969 年冬月廿四）为起点，按本地日历计算间隔天数，
逐年、逐月减去天数，得到农历年、月（含闰月）、日。

换算失败不抛异常，而是返回带 error 的 ConversionResult，由调用方显式处理；
需要异常语义时调用 ConversionResult.unwrap()。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Union

from .config import Config
from .decoder import leap_month, leap_month_days, month_days, year_days
from .errors import LunarCalendarError, OutOfRangeError
from .models import LunarDate, LunarMonth
from .table import (
    EPOCH_DATE,
    LUNAR_INFO,
    MAX_SOLAR,
    MIN_DATE_DAY,
    MIN_DATE_MONTH,
    MIN_SOLAR,
    MIN_YEAR,
)

logger = logging.getLogger(__name__)

SolarInput = Union[date, datetime, int, float]

RANGE_MESSAGE = f"日期超出农历计算范围, minDate: {MIN_SOLAR:%Y-%m-%d} maxDate: {MAX_SOLAR:%Y-%m-%d}"


@dataclass(frozen=True)
class ConversionResult:
    """换算结果：lunar 与 error 有且只有一个非空。"""

    lunar: Optional[LunarDate] = None
    error: Optional[LunarCalendarError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> LunarDate:
        """返回农历日期，失败时抛出对应的 LunarCalendarError。"""
        if self.error is not None:
            raise self.error
        return self.lunar


def lunar_from_offset(offset: int, table: tuple[int, ...] = LUNAR_INFO) -> LunarDate:
    """
    由距 1970-01-01 的天数推算农历日期。

    Args:
        offset: 距起点的整天数，起点当天为 0
        table: 农历数据表

    Raises:
        OutOfRangeError: offset 为负或超出数据表
        DataCorruptionError: 数据表闰月字段有误
    """
    if offset < 0:
        raise OutOfRangeError(RANGE_MESSAGE)

    # 推算农历年
    lunar_year = MIN_YEAR
    while offset > year_days(lunar_year, table):
        offset -= year_days(lunar_year, table)
        lunar_year += 1

    leap = leap_month(lunar_year, table)

    # 推算农历月，闰月所在月份先减正常月再减闰月
    lunar_month = MIN_DATE_MONTH if lunar_year == MIN_YEAR else 1
    is_leap = False
    while True:
        days = month_days(lunar_year, lunar_month, table)
        if offset <= days:
            break
        offset -= days

        if lunar_month == leap:
            leap_days = leap_month_days(lunar_year, table)
            if offset <= leap_days:
                is_leap = True
                break
            offset -= leap_days

        lunar_month += 1

    if lunar_year == MIN_YEAR and lunar_month == MIN_DATE_MONTH:
        # 1969 年冬月只截取了廿四到三十，起点当天 offset 为 0
        lunar_day = MIN_DATE_DAY + offset
    else:
        lunar_day = offset

    return LunarDate(
        year=lunar_year,
        month=LunarMonth(lunar_month, is_leap=is_leap),
        day=lunar_day,
        leap_month=leap,
    )


class LunarConverter:
    """公历转农历，按配置的时区解释输入的时间"""

    def __init__(self, config: Config | None = None, table: tuple[int, ...] = LUNAR_INFO):
        self.config = config or Config()
        self.table = table

    def to_local(self, value: SolarInput) -> datetime:
        """
        把输入统一为本地（配置时区）墙上时间，返回 naive datetime。

        - date: 当天 00:00
        - naive datetime: 视为本地时间
        - aware datetime: 转换到配置时区
        - int / float: Unix 时间戳（秒）
        """
        tz = self.config.timezone

        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value
            local = value.astimezone(tz) if tz is not None else value.astimezone()
            return local.replace(tzinfo=None)

        if isinstance(value, date):
            return datetime.combine(value, time.min)

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                if tz is not None:
                    return datetime.fromtimestamp(value, tz).replace(tzinfo=None)
                return datetime.fromtimestamp(value)
            except (OverflowError, OSError, ValueError) as e:
                raise OutOfRangeError(RANGE_MESSAGE) from e

        raise TypeError(f"unsupported solar date type: {type(value).__name__}")

    def in_range(self, value: SolarInput) -> bool:
        try:
            local = self.to_local(value)
        except OutOfRangeError:
            return False
        return MIN_SOLAR <= local <= MAX_SOLAR

    def convert(self, value: SolarInput) -> ConversionResult:
        """公历日期 / 时间 / 时间戳 -> 农历日期。"""
        try:
            local = self.to_local(value)
        except OutOfRangeError as e:
            logger.warning(f"无法换算 {value!r}: {e}")
            return ConversionResult(error=e)

        if local < MIN_SOLAR or local > MAX_SOLAR:
            logger.warning(f"{local:%Y-%m-%d %H:%M:%S} {RANGE_MESSAGE}")
            return ConversionResult(error=OutOfRangeError(RANGE_MESSAGE))

        offset = (local.date() - EPOCH_DATE).days
        try:
            lunar = lunar_from_offset(offset, self.table)
        except LunarCalendarError as e:
            return ConversionResult(error=e)

        logger.debug(f"{local:%Y-%m-%d} (offset {offset}) -> {lunar}")
        return ConversionResult(lunar=lunar)


_default_converter = LunarConverter()


def default_converter() -> LunarConverter:
    """使用本地时区的共享实例。"""
    return _default_converter


def convert(value: SolarInput) -> ConversionResult:
    return _default_converter.convert(value)


def get_lunar_date(value: SolarInput) -> Optional[str]:
    """返回农历月日文本（如 '正月初三'），超出范围返回 None。"""
    result = convert(value)
    if not result.ok:
        return None
    return result.lunar.text
