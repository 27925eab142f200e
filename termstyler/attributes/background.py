# attributes/background.py

from .base import PaletteColor

class BackgroundColor(PaletteColor):
    """ANSI background colours: 40-47, bright 100-107, palette via 48."""
    __slots__ = ()

    PALETTE_CODE = 48

    _NAMED = {
        40: ('BLACK', 'Black'),
        41: ('RED', 'Red'),
        42: ('GREEN', 'Green'),
        43: ('YELLOW', 'Yellow'),
        44: ('BLUE', 'Blue'),
        45: ('MAGENTA', 'Magenta'),
        46: ('CYAN', 'Cyan'),
        47: ('WHITE', 'White'),
        100: ('BRIGHT_BLACK', 'Bright Black'),
        101: ('BRIGHT_RED', 'Bright Red'),
        102: ('BRIGHT_GREEN', 'Bright Green'),
        103: ('BRIGHT_YELLOW', 'Bright Yellow'),
        104: ('BRIGHT_BLUE', 'Bright Blue'),
        105: ('BRIGHT_MAGENTA', 'Bright Magenta'),
        106: ('BRIGHT_CYAN', 'Bright Cyan'),
        107: ('BRIGHT_WHITE', 'Bright White'),
    }

BackgroundColor._install_members()
