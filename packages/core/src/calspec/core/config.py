"""配置常量模块 -- 可通过环境变量覆盖

包含 specification 文件目录等可配置项。
"""

import os
from pathlib import Path


def get_specs_dir() -> Path:
    """获取 specification 根目录"""
    return Path(os.environ.get("CALSPEC_SPECS_DIR", "specs"))


def get_calendars_dir() -> Path:
    """获取日历定义目录"""
    return Path(
        os.environ.get(
            "CALSPEC_CALENDARS_DIR",
            str(get_specs_dir() / "calendars"),
        )
    )


def get_modules_dir() -> Path:
    """获取模块定义目录"""
    return Path(
        os.environ.get(
            "CALSPEC_MODULES_DIR",
            str(get_specs_dir() / "modules"),
        )
    )


# registry 从目录加载时识别的文件后缀
SPEC_FILE_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")
YAML_FILE_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")
