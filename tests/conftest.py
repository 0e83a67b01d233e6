"""
测试共享 Fixtures

提供所有测试模块共享的配置、换算器和数据表。
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest
from typer.testing import CliRunner

from lunarcal.config import Config
from lunarcal.converter import LunarConverter
from lunarcal.table import LUNAR_INFO

# ═══════════════════════════════════════════════════════════
# 配置 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def test_config() -> Config:
    """固定东八区的测试配置。"""
    return Config(timezone=ZoneInfo("Asia/Shanghai"), log_level="DEBUG")


@pytest.fixture
def test_config_utc() -> Config:
    """UTC 测试配置。"""
    return Config(timezone=ZoneInfo("UTC"))


# ═══════════════════════════════════════════════════════════
# 换算器 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def converter(test_config: Config) -> LunarConverter:
    """东八区换算器。"""
    return LunarConverter(test_config)


@pytest.fixture
def utc_converter(test_config_utc: Config) -> LunarConverter:
    """UTC 换算器。"""
    return LunarConverter(test_config_utc)


# ═══════════════════════════════════════════════════════════
# 数据表 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def patched_table():
    """工厂函数：复制内置数据表并替换指定年份的编码值。"""

    def _create(**entries: int) -> tuple[int, ...]:
        table = list(LUNAR_INFO)
        for key, value in entries.items():
            table[int(key.lstrip("y")) - 1969] = value
        return tuple(table)

    return _create


@pytest.fixture
def corrupt_table(patched_table) -> tuple[int, ...]:
    """1970 年闰月字段为 13 的损坏数据表。"""
    return patched_table(y1970=0x096DD)


# ═══════════════════════════════════════════════════════════
# CLI Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
