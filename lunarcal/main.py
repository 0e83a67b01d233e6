"""
命令行入口

安装后通过 `lunarcal` 命令调用，或 `python -m lunarcal`。
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """主函数"""
    app(prog_name="lunarcal")


if __name__ == "__main__":
    main()
