import logging
from collections.abc import Iterator

from linkednumber.config import DEFAULT_BASE
from linkednumber.digit import Digit
from linkednumber.exceptions import (
    EmptyInputError,
    InvalidBaseError,
    InvalidInputError,
    InvalidNumberError,
    InvalidPositionError,
)
from linkednumber.linked_list import DigitChain, DigitNode
from linkednumber.parsing import check_base, split_digits, symbol_for

logger = logging.getLogger(__name__)


class LinkedNumber:
    """
    A number in any base from 2 to 36 stored as a doubly linked list of digits.

    The front of the list holds the most significant digit and the rear the
    least significant one. Positions used by ``add_digit`` and
    ``remove_digit`` count from the rear: position 0 is the last digit.
    """

    def __init__(self, num: str | int, base: int = DEFAULT_BASE):
        """
        Args:
            num: Digit string read most significant first, or a non-negative int.
                Ints are written in base 10 and always tagged with base 10.
            base: Base of the digit string (2-36). Digits that do not fit the
                base are kept; ``is_valid`` reports them.

        Raises:
            EmptyInputError: If ``num`` is None or an empty string
            InvalidDigitError: If a character is outside 0-9, A-Z, a-z
            InvalidInputError: If ``num`` is a negative int or not a str/int
            InvalidBaseError: If ``base`` is outside 2-36, or an int is given
                with a base other than 10
        """
        if isinstance(num, bool):
            raise InvalidInputError(f"cannot build a number from {num!r}")
        if isinstance(num, int):
            if num < 0:
                raise InvalidInputError(f"negative values are not supported: {num}")
            if base != DEFAULT_BASE:
                raise InvalidBaseError(f"integer input is always base {DEFAULT_BASE}, got base {base}")
            num = str(num)
        elif num is not None and not isinstance(num, str):
            raise InvalidInputError(f"cannot build a number from {type(num).__name__}")

        if not num:
            raise EmptyInputError("no digits given")

        self._base = check_base(base)
        # Parse everything before linking so a bad digit leaves nothing behind
        digits = [Digit(symbol) for symbol in split_digits(num)]
        self._digits = DigitChain(digits)

    @classmethod
    def from_string(cls, text: str, base: int) -> "LinkedNumber":
        return cls(text, base)

    @classmethod
    def from_int(cls, value: int) -> "LinkedNumber":
        return cls(value)

    @property
    def base(self) -> int:
        return self._base

    @property
    def front(self) -> DigitNode | None:
        """Node of the most significant digit, None when there are no digits."""
        return self._digits.head

    @property
    def rear(self) -> DigitNode | None:
        """Node of the least significant digit, None when there are no digits."""
        return self._digits.tail

    def is_valid(self) -> bool:
        """Return True if every digit is smaller than the base."""
        for digit in self._digits:
            if not 0 <= digit.value < self._base:
                return False
        return True

    def digit_count(self) -> int:
        count = 0
        for _ in self._digits:
            count += 1
        return count

    def __len__(self):
        return self.digit_count()

    def __iter__(self) -> Iterator[Digit]:
        return iter(self._digits)

    def __str__(self):
        return "".join(str(digit) for digit in self._digits)

    def __repr__(self):
        return f"LinkedNumber({str(self)!r}, base={self._base})"

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, LinkedNumber):
            return NotImplemented
        if self._base != other._base:
            return False

        current, other_current = self._digits.head, other._digits.head
        while current and other_current:
            if current.digit != other_current.digit:
                return False
            current, other_current = current.next, other_current.next

        # Equal only if both ran out together
        return current is None and other_current is None

    # Mutable, so instances are not hashable
    __hash__ = None

    def to_int(self) -> int:
        """
        Return the represented value as a Python int.

        Digits are weighted by ``base ** position`` counting from the rear, so
        the front digit is the most significant one.

        Raises:
            InvalidNumberError: If a digit does not fit the base
        """
        if not self.is_valid():
            raise InvalidNumberError(f"{self!r} has digits outside base {self._base}")

        total = 0
        radix = 1
        for digit in reversed(self._digits):
            total += digit.value * radix
            radix *= self._base
        return total

    def __int__(self):
        return self.to_int()

    def convert(self, new_base: int) -> "LinkedNumber":
        """
        Return a new number with the same value written in ``new_base``.

        The value goes through a Python int, so there is no width limit.
        Zero converts to the single digit "0" and leading zeros are dropped.
        The receiver is not modified.

        Raises:
            InvalidNumberError: If this number has digits outside its base
            InvalidBaseError: If ``new_base`` is outside 2-36
        """
        if not self.is_valid():
            raise InvalidNumberError("cannot convert invalid number")
        check_base(new_base)

        value = self.to_int()
        symbols = []
        while value:
            value, rem = divmod(value, new_base)
            symbols.append(symbol_for(rem))
        text = "".join(reversed(symbols)) or symbol_for(0)

        logger.debug(
            "Converted %d digits in base %d to %d digits in base %d", self._digits.size, self._base, len(text), new_base
        )
        return LinkedNumber(text, new_base)

    def add_digit(self, digit: Digit | str, position: int) -> None:
        """
        Insert a digit so that it ends up at ``position``.

        Position 0 adds a new least significant digit, ``digit_count()`` adds
        a new most significant digit. Digits at or above ``position`` move up
        by one.

        Raises:
            InvalidPositionError: If position is below 0 or above digit_count()
            InvalidDigitError: If a string digit is outside the alphabet
        """
        size = self.digit_count()
        if position < 0 or position > size:
            raise InvalidPositionError(f"invalid position {position} for {size} digits")
        if not isinstance(digit, Digit):
            digit = Digit(digit)

        if position == 0:
            self._digits.append(digit)
        elif position == size:
            self._digits.prepend(digit)
        else:
            # Walk size - position steps from the front to the digit just below
            current = self._digits.head
            for _ in range(size - position):
                current = current.next
            self._digits.insert_before(current, digit)

        logger.debug("Added digit %s at position %d, now %d digits", digit, position, self._digits.size)

    def remove_digit(self, position: int) -> int:
        """
        Remove the digit at ``position`` and return its positional value.

        Returns:
            ``digit.value * base ** position``, the amount the removed digit
            contributed to the number

        Raises:
            InvalidPositionError: If position is below 0 or not below digit_count()
        """
        size = self.digit_count()
        if position < 0 or position >= size:
            raise InvalidPositionError(f"invalid position {position} for {size} digits")

        node = self._digits.node_at(position)
        value = node.digit.value * self._base**position
        self._digits.remove_node(node)

        logger.debug("Removed digit %s at position %d, worth %d", node.digit, position, value)
        return value
