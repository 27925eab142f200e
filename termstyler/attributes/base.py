# attributes/base.py

from typing import Dict, Optional, Protocol, Tuple, runtime_checkable

MIN_CODE = 0
MAX_CODE = 255

# Sub-selector meaning "a 256-colour palette index follows"
PALETTE_SELECTOR = 5


def check_code(value: int, what: str = "SGR code") -> int:
    """Return value if it fits in a single byte, else raise ValueError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if not MIN_CODE <= value <= MAX_CODE:
        raise ValueError(f"{what} {value} is outside {MIN_CODE}-{MAX_CODE}")
    return value


@runtime_checkable
class Coded(Protocol):
    """Protocol shared by every attribute family that maps to an SGR code."""

    @classmethod
    def from_code(cls, code: int) -> Optional["Coded"]: ...

    @property
    def code(self) -> int: ...

    @property
    def description(self) -> str: ...

    def additional_codes(self) -> Optional[Tuple[int, int]]: ...


class CodedAttribute:
    """
    Common behaviour for the attribute families.

    Instances are immutable. Equality and hashing look only at the primary
    code, so two palette colours with different indices compare equal.
    Subclasses supply the name tables and construction rules.
    """
    __slots__ = ('_code',)

    # code -> (ATTRIBUTE_NAME, description); filled in by subclasses
    _NAMED: Dict[int, Tuple[str, str]] = {}

    @property
    def code(self) -> int:
        return self._code

    @property
    def name(self) -> Optional[str]:
        """Attribute name of the variant, None for escape-hatch values."""
        entry = self._NAMED.get(self._code)
        return entry[0] if entry else None

    @property
    def description(self) -> str:
        return self._NAMED[self._code][1]

    def additional_codes(self) -> Optional[Tuple[int, int]]:
        return None

    @classmethod
    def members(cls) -> tuple:
        """All named variants, in code order."""
        return tuple(getattr(cls, name) for name, _ in cls._NAMED.values())

    @classmethod
    def from_code(cls, code: int):
        """Return the named variant for code, or None."""
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        entry = cls._NAMED.get(code)
        return getattr(cls, entry[0]) if entry else None

    @classmethod
    def _install_members(cls) -> None:
        for code, (name, _) in cls._NAMED.items():
            setattr(cls, name, cls(code))

    def __setattr__(self, key, value):
        if hasattr(self, '_code'):
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(key, value)

    def _init_args(self) -> tuple:
        return (self._code,)

    def __reduce__(self):
        return (type(self), self._init_args())

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._code == other._code

    def __hash__(self):
        return hash((type(self).__name__, self._code))

    def __str__(self):
        return self.description

    def __repr__(self):
        name = self.name
        if name:
            return f"{type(self).__name__}.{name}"
        return f"{type(self).__name__}({self._code})"


class PaletteColor(CodedAttribute):
    """
    A colour family: sixteen named colours plus a 256-colour palette entry
    signalled by PALETTE_CODE followed by (PALETTE_SELECTOR, index).
    """
    __slots__ = ('_palette_index',)

    PALETTE_CODE: int = 0

    def __init__(self, code: int, palette_index: Optional[int] = None):
        check_code(code)
        if code == self.PALETTE_CODE:
            if palette_index is None:
                raise ValueError(
                    f"{type(self).__name__} code {code} needs a palette index"
                )
            palette_index = check_code(palette_index, "palette index")
        elif code not in self._NAMED:
            raise ValueError(f"{code} is not a {type(self).__name__} code")
        elif palette_index is not None:
            raise ValueError(
                f"palette index only applies to code {self.PALETTE_CODE}, not {code}"
            )
        # Payload first: the instance locks once _code is set
        self._palette_index = palette_index
        self._code = code

    @classmethod
    def indexed(cls, palette_index: int):
        """Entry palette_index of the terminal's 256-colour table."""
        return cls(cls.PALETTE_CODE, palette_index)

    @classmethod
    def from_code_extended(cls, code: int, palette_index: int):
        """
        Like from_code, but a PALETTE_CODE primary builds the palette
        variant carrying palette_index. Other codes ignore the index.
        """
        if code == cls.PALETTE_CODE:
            try:
                return cls.indexed(palette_index)
            except (TypeError, ValueError):
                return None
        return cls.from_code(code)

    @property
    def palette_index(self) -> Optional[int]:
        return self._palette_index

    @property
    def is_indexed(self) -> bool:
        return self._palette_index is not None

    @property
    def description(self) -> str:
        if self.is_indexed:
            return f"ANSI 256-color ({self._palette_index})"
        return super().description

    def additional_codes(self) -> Optional[Tuple[int, int]]:
        if self.is_indexed:
            return (PALETTE_SELECTOR, self._palette_index)
        return None

    def _init_args(self) -> tuple:
        return (self._code, self._palette_index)

    def __repr__(self):
        if self.is_indexed:
            return f"{type(self).__name__}.indexed({self._palette_index})"
        return super().__repr__()
