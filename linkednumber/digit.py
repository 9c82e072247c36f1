from dataclasses import dataclass, field

from linkednumber.parsing import symbol_for, symbol_value


@dataclass(frozen=True)
class Digit:
    """A single digit symbol and its magnitude (0-35)."""

    symbol: str
    value: int = field(init=False)

    def __post_init__(self):
        # value is derived once; the instance is frozen afterwards
        object.__setattr__(self, "value", symbol_value(self.symbol))

    @classmethod
    def from_value(cls, value: int) -> "Digit":
        """Build the canonical (upper-case) digit for a magnitude."""
        return cls(symbol_for(value))

    def __str__(self):
        return self.symbol

    def __eq__(self, other):
        if not isinstance(other, Digit):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)
