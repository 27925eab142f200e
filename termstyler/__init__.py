# __init__.py

from .logger import Logger
from .attributes import Coded, ForegroundColor, BackgroundColor, Effect
from .style import PRESETS, Preset, StyledText, TerminalStyle, get_preset, preset_names
from .utility import (
    highlight,
    highlight_black,
    highlight_red,
    highlight_green,
    highlight_yellow,
    highlight_blue,
    highlight_magenta,
    highlight_cyan,
    highlight_white,
    highlight_bright_black,
    highlight_bright_red,
    highlight_bright_green,
    highlight_bright_yellow,
    highlight_bright_blue,
    highlight_bright_magenta,
    highlight_bright_cyan,
    highlight_bright_white,
    highlight_red_on_white,
    highlight_white_on_red,
    highlight_black_on_yellow,
    highlight_white_on_blue,
)
from .catalog import preset_table, render_catalog

__all__ = [
    "Logger",
    "Coded",
    "ForegroundColor",
    "BackgroundColor",
    "Effect",
    "TerminalStyle",
    "StyledText",
    "Preset",
    "PRESETS",
    "get_preset",
    "preset_names",
    "highlight",
    "highlight_black",
    "highlight_red",
    "highlight_green",
    "highlight_yellow",
    "highlight_blue",
    "highlight_magenta",
    "highlight_cyan",
    "highlight_white",
    "highlight_bright_black",
    "highlight_bright_red",
    "highlight_bright_green",
    "highlight_bright_yellow",
    "highlight_bright_blue",
    "highlight_bright_magenta",
    "highlight_bright_cyan",
    "highlight_bright_white",
    "highlight_red_on_white",
    "highlight_white_on_red",
    "highlight_black_on_yellow",
    "highlight_white_on_blue",
    "preset_table",
    "render_catalog",
]
