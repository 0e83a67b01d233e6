"""
集中配置管理

从环境变量 / .env 文件加载配置项，并提供校验与默认值。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Config:
    """不可变配置对象，一次加载、全局使用。"""

    # 换算所用时区，None 表示使用本机本地时区
    timezone: Optional[ZoneInfo] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def timezone_name(self) -> str:
        return self.timezone.key if self.timezone is not None else "local"

    @classmethod
    def from_env(
        cls,
        env_path: str | Path | None = None,
        load_dotenv_file: bool = True,
    ) -> "Config":
        """从 .env 文件 + 环境变量构建 Config 实例。"""
        if env_path:
            load_dotenv(env_path, override=True)
        elif load_dotenv_file:
            # 优先级:
            # 1. 当前目录 .lunarcal/.env
            # 2. 当前目录 .env
            # 3. 项目根目录 .env (源码运行)
            # 4. ~/.lunarcal/.env
            project_root = Path(__file__).resolve().parent.parent
            candidates = [
                Path.cwd() / ".lunarcal" / ".env",
                Path.cwd() / ".env",
                project_root / ".env",
                Path.home() / ".lunarcal" / ".env",
            ]

            for candidate in candidates:
                if candidate.exists():
                    load_dotenv(candidate, override=True)
                    break

        # 时区
        tz: Optional[ZoneInfo] = None
        tz_name = os.getenv("LUNAR_TZ", "").strip()
        if tz_name:
            try:
                tz = ZoneInfo(tz_name)
            except (ZoneInfoNotFoundError, ValueError):
                print(f"[WARN] 无法识别时区 '{tz_name}'，回退到本地时区")

        # 日志级别
        level = os.getenv("LUNAR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(level), int):
            print(f"[WARN] 无法识别日志级别 '{level}'，回退到 {DEFAULT_LOG_LEVEL}")
            level = DEFAULT_LOG_LEVEL

        return cls(timezone=tz, log_level=level)
