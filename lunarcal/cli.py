from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .calendar_view import build_month, weeks
from .config import Config
from .converter import LunarConverter
from .decoder import leap_month, month_lengths, year_days
from .errors import LunarCalendarError
from .festival import get_lunar_festival
from .formatter import format_month
from .selfcheck import check_table, verify_accuracy

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
WEEKDAY_NAMES = ["一", "二", "三", "四", "五", "六", "日"]

app = typer.Typer(help="lunarcal — 公历转农历 (1970-2100)")
console = Console()


def _now(config: Config) -> datetime:
    """配置时区下的当前时间（带时区信息）。"""
    if config.timezone is not None:
        return datetime.now(config.timezone)
    return datetime.now().astimezone()


def _parse_solar(text: Optional[str], config: Config) -> datetime:
    if not text:
        return _now(config)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        console.print(f"[red]❌ 无法解析日期: {text}，请使用 YYYY-MM-DD 或 YYYY-MM-DDTHH:MM:SS[/red]")
        raise typer.Exit(1)


@app.callback()
def _setup(
    ctx: typer.Context,
    tz: Optional[str] = typer.Option(None, "--tz", help="换算所用时区（IANA 名称），默认读取 LUNAR_TZ"),
):
    """加载配置并初始化日志"""
    config = Config.from_env()
    if tz:
        try:
            config = replace(config, timezone=ZoneInfo(tz))
        except (ZoneInfoNotFoundError, ValueError):
            console.print(f"[red]❌ 无法识别时区: {tz}[/red]")
            raise typer.Exit(1)

    logging.basicConfig(format=LOG_FORMAT, level=config.log_level)
    ctx.obj = config


@app.command()
def convert(
    ctx: typer.Context,
    solar: Optional[str] = typer.Argument(None, help="公历日期，如 2026-02-17，默认今天"),
):
    """公历日期转农历"""
    config: Config = ctx.obj
    converter = LunarConverter(config)
    moment = _parse_solar(solar, config)
    result = converter.convert(moment)

    if not result.ok:
        console.print(f"[red]❌ {result.error}[/red]")
        raise typer.Exit(1)

    lunar = result.lunar
    local = converter.to_local(moment)
    leap_str = format_month(lunar.leap_month, is_leap=True) if lunar.leap_month else "无"
    body = "\n".join(
        [
            f"公历: {local:%Y-%m-%d %H:%M:%S} ({config.timezone_name})",
            f"农历: {lunar}",
            f"当年闰月: {leap_str}",
            f"节日: {lunar.festival or '-'}",
        ]
    )
    console.print(Panel(body, title="农历换算", expand=False))


@app.command()
def festival(
    year: int = typer.Argument(..., help="农历年"),
    month: int = typer.Argument(..., help="农历月 (1-12)"),
    day: int = typer.Argument(..., help="农历日 (1-30)"),
):
    """查询农历日期对应的传统节日"""
    try:
        name = get_lunar_festival(year, month, day)
    except (LunarCalendarError, ValueError) as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    if name is None:
        console.print(f"[yellow]农历{year}年{month}月{day}日不是传统节日[/yellow]")
    else:
        console.print(f"[bold green]{name}[/bold green]")


@app.command()
def month(
    ctx: typer.Context,
    year: Optional[int] = typer.Argument(None, help="公历年，默认今年"),
    month: Optional[int] = typer.Argument(None, help="公历月，默认本月"),
):
    """显示公历月历，并标注农历日期与节日"""
    today = _now(ctx.obj).date()
    if year is None:
        year = today.year
    if month is None:
        month = today.month
    if month < 1 or month > 12:
        console.print(f"[red]❌ 无效的月份: {month}[/red]")
        raise typer.Exit(1)

    try:
        cells = build_month(year, month, LunarConverter(ctx.obj))
    except ValueError as e:
        # 公历年份超出 datetime 支持的 1-9999
        console.print(f"[red]❌ 无效的日期: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{year}年{month}月", show_lines=True)
    for name in WEEKDAY_NAMES:
        table.add_column(name, justify="center")

    for row in weeks(cells):
        rendered = []
        for cell in row:
            if cell is None:
                rendered.append("")
            elif cell.festival:
                rendered.append(f"{cell.solar.day}\n[red]{cell.label}[/red]")
            else:
                rendered.append(f"{cell.solar.day}\n[dim]{cell.label}[/dim]")
        table.add_row(*rendered)

    console.print(table)


@app.command()
def year(year: int = typer.Argument(..., help="农历年 (1969-2100)")):
    """显示农历年的各月大小与闰月"""
    try:
        months = month_lengths(year)
        leap = leap_month(year)
        total = year_days(year)
    except LunarCalendarError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"农历{year}年")
    table.add_column("月份")
    table.add_column("天数", justify="right")
    table.add_column("大小", justify="center")
    for lunar_month, days in months:
        table.add_row(lunar_month.name, str(days), "大" if days == 30 else "小")

    console.print(table)
    leap_str = format_month(leap, is_leap=True) if leap else "无闰月"
    console.print(f"全年 {total} 天，{leap_str}")


@app.command()
def verify(ctx: typer.Context):
    """检查数据表并核对已知日期"""
    problems = check_table()
    for problem in problems:
        console.print(f"[red]❌ {problem}[/red]")
    if not problems:
        console.print("[green]✅ 数据表检查通过[/green]")

    all_passed = not problems
    for case in verify_accuracy(LunarConverter(ctx.obj)):
        status = "[green]PASS[/green]" if case.passed else "[red]FAIL[/red]"
        console.print(
            f"{status} {case.solar:%Y-%m-%d} "
            f"lunar={case.actual_text} festival={case.actual_festival}"
        )
        if not case.passed:
            console.print(f"  expected lunar={case.expected_text} festival={case.expected_festival}")
        all_passed = all_passed and case.passed

    console.print("RESULT:", "PASS" if all_passed else "FAIL")
    if not all_passed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
