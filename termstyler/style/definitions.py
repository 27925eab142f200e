# style/definitions.py

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..attributes import BackgroundColor, Effect, ForegroundColor
from ..logger import Logger

ESC = '\x1b'
CSI = f'{ESC}['
RESET_CODE = 0

FMT = lambda x: f'{CSI}{x}m'  # Core formatting utility

RESET = FMT(RESET_CODE)

logger = Logger(__name__)


@dataclass(frozen=True)
class Preset:
    """A named, table-driven style: effects, foreground and optional background."""
    name: str
    effects: Tuple[Effect, ...] = field(default_factory=tuple)
    foreground: Optional[ForegroundColor] = None
    background: Optional[BackgroundColor] = None
    description: str = ''


def _create_default_presets() -> Dict[str, Preset]:
    """Return the default preset table, in display order."""
    presets: List[Preset] = [Preset('no_color', description='No styling')]

    # Normal colours reset first, bright colours are drawn bold
    for color in ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'):
        fg = getattr(ForegroundColor, color.upper())
        presets.append(Preset(color, (Effect.NORMAL,), fg,
                              description=fg.description))
    for color in ('black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'):
        fg = getattr(ForegroundColor, f'BRIGHT_{color.upper()}')
        presets.append(Preset(f'bright_{color}', (Effect.BOLD,), fg,
                              description=f'Bold {fg.description}'))

    combos = [
        ('red', 'white'),
        ('white', 'red'),
        ('black', 'yellow'),
        ('white', 'blue'),
    ]
    for fg_name, bg_name in combos:
        fg = getattr(ForegroundColor, fg_name.upper())
        bg = getattr(BackgroundColor, bg_name.upper())
        presets.append(Preset(f'{fg_name}_on_{bg_name}', (Effect.NORMAL,), fg, bg,
                              description=f'{fg.description} on {bg.description}'))

    table = {}
    for preset in presets:
        if preset.name in table:
            raise ValueError(f"Duplicate preset '{preset.name}'")
        table[preset.name] = preset
    return table


PRESETS: Dict[str, Preset] = _create_default_presets()


def preset_names() -> List[str]:
    """Names of every preset, in table order."""
    return list(PRESETS)


def get_preset(name: str) -> Preset:
    """Look up a preset by name."""
    try:
        return PRESETS[name]
    except KeyError:
        logger.debug(f"Unknown preset requested: {name!r}")
        raise ValueError(f"Unknown preset '{name}'") from None
