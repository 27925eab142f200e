# style/engine.py

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..attributes import (
    PALETTE_SELECTOR,
    BackgroundColor,
    Effect,
    ForegroundColor,
    check_code,
)
from ..logger import Logger
from .definitions import FMT, RESET_CODE, Preset, get_preset

logger = Logger(__name__)


class TerminalStyle:
    """
    An SGR style: an ordered list of raw codes and the escape command built
    from them.

    Styles are immutable. Build one from structured attributes with
    `build`, from raw codes with `from_codes`, or from the preset table
    with `preset`. Two styles are equal when their commands are equal.
    """
    __slots__ = ('_codes', '_command')

    def __init__(self, codes: Optional[Iterable[int]] = None):
        self._codes: Tuple[int, ...] = tuple(check_code(c) for c in (codes or ()))
        # Locks the instance; see __setattr__
        self._command = self._make_command(self._codes)

    def __setattr__(self, key, value):
        if hasattr(self, '_command'):
            raise AttributeError("TerminalStyle is immutable")
        super().__setattr__(key, value)

    def __reduce__(self):
        return (type(self), (list(self._codes),))

    # Construction ------------------------------------------------------------

    @classmethod
    def from_codes(cls, codes: Iterable[int]) -> "TerminalStyle":
        """Style from raw SGR codes, kept in the given order and not validated."""
        return cls(codes)

    @classmethod
    def empty(cls) -> "TerminalStyle":
        """The no-colour style; renders as the reset command."""
        return cls()

    @classmethod
    def build(
        cls,
        effects: Optional[Sequence[Effect]] = None,
        foreground: Optional[ForegroundColor] = None,
        background: Optional[BackgroundColor] = None,
    ) -> "TerminalStyle":
        """
        Compose a style from attributes.

        Codes are laid out as: effects in the order given (duplicates kept),
        then the foreground code, then the background code. Palette colours
        are followed by their (5, index) pair.
        """
        codes: List[int] = [effect.code for effect in (effects or ())]
        for color in (foreground, background):
            if color is None:
                continue
            codes.append(color.code)
            extra = color.additional_codes()
            if extra:
                codes.extend(extra)
        return cls(codes)

    @classmethod
    def from_preset(cls, preset: Preset) -> "TerminalStyle":
        return cls.build(preset.effects, preset.foreground, preset.background)

    @classmethod
    def preset(cls, name: str) -> "TerminalStyle":
        """Style for a named entry of the preset table."""
        return cls.from_preset(get_preset(name))

    # Rendering ---------------------------------------------------------------

    @property
    def codes(self) -> Tuple[int, ...]:
        return self._codes

    @property
    def command(self) -> str:
        return self._command

    def render(self) -> str:
        """Return the escape command, e.g. '\\x1b[1;93m'."""
        return self._command

    def wrap(self, text: str) -> str:
        """Surround text with this style's command and a trailing reset."""
        return f"{self._command}{text}{RESET_STYLE.render()}"

    @staticmethod
    def _make_command(codes: Tuple[int, ...]) -> str:
        if not codes:
            return FMT(RESET_CODE)
        return FMT(';'.join(str(code) for code in codes))

    # Decoding ----------------------------------------------------------------

    def decode_effects(self) -> List[Effect]:
        """
        Every code read back as an effect, in order.

        Codes are not tagged by origin, so colour codes come back too, as
        by-code effects (31 -> Effect.by_code(31)).
        """
        return [Effect.decode(code) for code in self._codes]

    def decode_foreground(self) -> Optional[ForegroundColor]:
        """Last foreground colour in the code list, or None."""
        return self._decode_color(ForegroundColor)

    def decode_background(self) -> Optional[BackgroundColor]:
        """Last background colour in the code list, or None."""
        return self._decode_color(BackgroundColor)

    def _decode_color(self, family):
        found = None
        for code, palette_index in self._iter_color_codes():
            if palette_index is None:
                color = family.from_code(code)
            else:
                color = family.from_code_extended(code, palette_index)
            if color is not None:
                found = color
        return found

    def _iter_color_codes(self) -> Iterator[Tuple[int, Optional[int]]]:
        """
        Yield (code, palette_index) pairs, consuming each 38;5;n / 48;5;n
        triple as one entry so selector and index are never read as colours.
        A palette code without a complete triple is skipped.
        """
        palette_codes = (ForegroundColor.PALETTE_CODE, BackgroundColor.PALETTE_CODE)
        codes = self._codes
        i = 0
        while i < len(codes):
            code = codes[i]
            if code in palette_codes:
                if i + 2 < len(codes) and codes[i + 1] == PALETTE_SELECTOR:
                    yield code, codes[i + 2]
                    i += 3
                    continue
                logger.debug(f"Incomplete palette sequence at position {i} in {list(codes)}")
            else:
                yield code, None
            i += 1

    # Dunder ------------------------------------------------------------------

    def __str__(self):
        return self._command

    def __repr__(self):
        return f"TerminalStyle({list(self._codes)!r})"

    def __eq__(self, other):
        if not isinstance(other, TerminalStyle):
            return NotImplemented
        return self._command == other._command

    def __hash__(self):
        return hash(self._command)


RESET_STYLE = TerminalStyle.empty()
