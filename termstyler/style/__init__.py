# style/__init__.py

from .definitions import CSI, ESC, FMT, PRESETS, RESET, Preset, get_preset, preset_names
from .engine import TerminalStyle
from .text import StyledText

__all__ = [
    'CSI',
    'ESC',
    'FMT',
    'RESET',
    'PRESETS',
    'Preset',
    'get_preset',
    'preset_names',
    'TerminalStyle',
    'StyledText',
]
