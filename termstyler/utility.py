# utility.py

from typing import Optional

from .style import StyledText, TerminalStyle

DEFAULT_PRESET = 'bright_yellow'


def highlight(text: str, style: Optional[TerminalStyle] = None) -> StyledText:
    """
    Highlight text in the given style, defaulting to bright yellow.

    Returns a StyledText ready to drop into string output.
    """
    if style is None:
        style = TerminalStyle.preset(DEFAULT_PRESET)
    return StyledText(text, style)


def _preset_text(text: str, name: str) -> StyledText:
    return StyledText(text, TerminalStyle.preset(name))


# One helper per colour preset
def highlight_black(text: str) -> StyledText: return _preset_text(text, 'black')
def highlight_red(text: str) -> StyledText: return _preset_text(text, 'red')
def highlight_green(text: str) -> StyledText: return _preset_text(text, 'green')
def highlight_yellow(text: str) -> StyledText: return _preset_text(text, 'yellow')
def highlight_blue(text: str) -> StyledText: return _preset_text(text, 'blue')
def highlight_magenta(text: str) -> StyledText: return _preset_text(text, 'magenta')
def highlight_cyan(text: str) -> StyledText: return _preset_text(text, 'cyan')
def highlight_white(text: str) -> StyledText: return _preset_text(text, 'white')

# Bright and bold
def highlight_bright_black(text: str) -> StyledText: return _preset_text(text, 'bright_black')
def highlight_bright_red(text: str) -> StyledText: return _preset_text(text, 'bright_red')
def highlight_bright_green(text: str) -> StyledText: return _preset_text(text, 'bright_green')
def highlight_bright_yellow(text: str) -> StyledText: return _preset_text(text, 'bright_yellow')
def highlight_bright_blue(text: str) -> StyledText: return _preset_text(text, 'bright_blue')
def highlight_bright_magenta(text: str) -> StyledText: return _preset_text(text, 'bright_magenta')
def highlight_bright_cyan(text: str) -> StyledText: return _preset_text(text, 'bright_cyan')
def highlight_bright_white(text: str) -> StyledText: return _preset_text(text, 'bright_white')

# With background
def highlight_red_on_white(text: str) -> StyledText: return _preset_text(text, 'red_on_white')
def highlight_white_on_red(text: str) -> StyledText: return _preset_text(text, 'white_on_red')
def highlight_black_on_yellow(text: str) -> StyledText: return _preset_text(text, 'black_on_yellow')
def highlight_white_on_blue(text: str) -> StyledText: return _preset_text(text, 'white_on_blue')
