# attributes/foreground.py

from .base import PaletteColor

class ForegroundColor(PaletteColor):
    """ANSI text (foreground) colours: 30-37, bright 90-97, palette via 38."""
    __slots__ = ()

    PALETTE_CODE = 38

    _NAMED = {
        30: ('BLACK', 'Black'),
        31: ('RED', 'Red'),
        32: ('GREEN', 'Green'),
        33: ('YELLOW', 'Yellow'),
        34: ('BLUE', 'Blue'),
        35: ('MAGENTA', 'Magenta'),
        36: ('CYAN', 'Cyan'),
        37: ('WHITE', 'White'),
        90: ('BRIGHT_BLACK', 'Bright Black'),
        91: ('BRIGHT_RED', 'Bright Red'),
        92: ('BRIGHT_GREEN', 'Bright Green'),
        93: ('BRIGHT_YELLOW', 'Bright Yellow'),
        94: ('BRIGHT_BLUE', 'Bright Blue'),
        95: ('BRIGHT_MAGENTA', 'Bright Magenta'),
        96: ('BRIGHT_CYAN', 'Bright Cyan'),
        97: ('BRIGHT_WHITE', 'Bright White'),
    }

ForegroundColor._install_members()
