# style/text.py

import threading

from ..logger import Logger
from .engine import TerminalStyle

logger = Logger(__name__)


class StyledText:
    """
    Text paired with a TerminalStyle, holding the wrapped terminal output.

    The output is recomputed on every change, so `output` always matches
    the current text and style. Printing the object prints the output.

        >>> greeting = StyledText("Hello, World!", TerminalStyle.preset('bright_yellow'))
        >>> greeting.output
        '\\x1b[1;93mHello, World!\\x1b[0m'
    """

    def __init__(self, text: str, style: TerminalStyle):
        self._lock = threading.Lock()
        self._text = self._check_text(text)
        self._style = self._check_style(style)
        self._output = self._style.wrap(self._text)

    @property
    def text(self) -> str:
        """The un-styled original text."""
        return self._text

    @property
    def style(self) -> TerminalStyle:
        return self._style

    @property
    def output(self) -> str:
        """The text wrapped in the style's escape sequences."""
        return self._output

    def set_text(self, new_text: str) -> str:
        """Replace the text and return the previous one."""
        new_text = self._check_text(new_text)
        with self._lock:
            previous = self._text
            self._text = new_text
            self._update_output()
        return previous

    def set_style(self, new_style: TerminalStyle) -> TerminalStyle:
        """Replace the style and return the previous one."""
        new_style = self._check_style(new_style)
        with self._lock:
            previous = self._style
            self._style = new_style
            self._update_output()
        logger.debug(f"Style changed from {previous!r} to {new_style!r}")
        return previous

    def _update_output(self) -> None:
        self._output = self._style.wrap(self._text)

    @staticmethod
    def _check_text(text) -> str:
        if not isinstance(text, str):
            raise TypeError(f"text must be a str, got {type(text).__name__}")
        return text

    @staticmethod
    def _check_style(style) -> TerminalStyle:
        if not isinstance(style, TerminalStyle):
            raise TypeError(f"style must be a TerminalStyle, got {type(style).__name__}")
        return style

    def __reduce__(self):
        # The lock is per instance; copies rebuild from text and style
        with self._lock:
            return (type(self), (self._text, self._style))

    def __str__(self):
        return self._output

    def __len__(self):
        return len(self._text)

    def __repr__(self):
        return f"StyledText({self._text!r}, {self._style!r})"

    def __eq__(self, other):
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._output == other._output

    __hash__ = None
