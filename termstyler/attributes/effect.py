# attributes/effect.py

from .base import CodedAttribute, check_code

class Effect(CodedAttribute):
    """
    SGR display effects (bold, italic, ...).

    Any byte is a valid effect: codes without a name become a "by code"
    effect carrying the raw value.
    """
    __slots__ = ()

    _NAMED = {
        0: ('NORMAL', 'normal/reset'),
        1: ('BOLD', 'bold'),
        2: ('FAINT', 'faint'),
        3: ('ITALIC', 'italic'),
        4: ('UNDERLINE', 'underline'),
        5: ('SLOW_BLINK', 'slow blink'),
        6: ('RAPID_BLINK', 'rapid blink'),
        9: ('CROSSED_OUT', 'crossed-out'),
    }

    def __init__(self, code: int):
        self._code = check_code(code)

    @classmethod
    def by_code(cls, code: int) -> "Effect":
        """Effect for a raw SGR code, named or not."""
        return cls(code)

    @classmethod
    def decode(cls, code: int) -> "Effect":
        """Named effect for code, falling back to the by-code variant."""
        return cls.from_code(code) or cls.by_code(code)

    @property
    def is_named(self) -> bool:
        return self._code in self._NAMED

    @property
    def description(self) -> str:
        if self.is_named:
            return super().description
        return f"SGR Code {self._code}"

Effect._install_members()
