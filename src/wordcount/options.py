"""Counting modes."""

from enum import Enum


class CountOption(Enum):
    """Granularity at which tokens are counted."""

    CHAR = "char"  # Each Unicode code point
    WORD = "word"  # Each maximal \w+ run
    LINE = "line"  # Each line, terminator stripped

    @classmethod
    def parse(cls, value: "str | CountOption") -> "CountOption":
        """Convert a mode name (case-insensitive) to a CountOption.

        Raises:
            ValueError: If the name is not a known mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(o.value for o in cls)
            raise ValueError(f"Unknown count mode: {value!r} (choose from {choices})") from None


DEFAULT_COUNT_OPTION = CountOption.WORD
