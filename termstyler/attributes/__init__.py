# attributes/__init__.py

from .base import Coded, CodedAttribute, PaletteColor, PALETTE_SELECTOR, check_code
from .foreground import ForegroundColor
from .background import BackgroundColor
from .effect import Effect

__all__ = [
    'Coded',
    'CodedAttribute',
    'PaletteColor',
    'PALETTE_SELECTOR',
    'check_code',
    'ForegroundColor',
    'BackgroundColor',
    'Effect',
]
