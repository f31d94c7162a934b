"""
=============================================================================
DELIMITER SPLITTER (TOKENIZER STATE MACHINE)
=============================================================================

Splits a string into a FIXED number of fields by scanning it once, left
to right, against an ordered list of delimiter characters.

=============================================================================
PATTERN LANGUAGE
=============================================================================

A pattern is a string of delimiter characters, consumed in order:

    "/"       One required delimiter             → 2 fields
    ":/"      ':' then '/'                       → 3 fields
    "?:/"     OPTIONAL ':' then required '/'     → 3 fields

The '?' marker makes the NEXT character optional and the character after
it its lookahead. "?:/" reads as: "a ':' may come here, but a '/' comes
either way". When the scanner meets the lookahead before the optional
delimiter, the optional segment was skipped and an empty field is emitted
in its place. That keeps the output shape fixed:

    Splitter("?:/").split(text)    →   (host, port, path)

    "example.org"                  →   ("example.org", "",   "")
    "example.org/a/b"              →   ("example.org", "",   "a/b")
    "example.org:8080"             →   ("example.org", "8080", "")
    "example.org:8080/a/b"         →   ("example.org", "8080", "a/b")
    "example.org/a:b"              →   ("example.org", "",   "a:b")

Once every step of the pattern has been consumed, the remaining input is
copied into the last field verbatim, delimiters included.

=============================================================================
STATE MACHINE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │  state = (current step, lookahead, field accumulator)               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  char == step.delimiter                                              │
    │      close field                                                     │
    │      optional step?  → expect its lookahead next (required)          │
    │      otherwise       → advance to next step                          │
    │                                                                      │
    │  char == step.lookahead   (optional step only)                       │
    │      close field, emit "" for the skipped segment                    │
    │      advance to next step                                            │
    │                                                                      │
    │  no step left, or any other char                                     │
    │      accumulate                                                      │
    │                                                                      │
    │  end of input                                                        │
    │      close field, "" if an optional step is still open               │
    │      pad with "" up to (number of delimiters + 1)                    │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from dataclasses import dataclass
from typing import Iterator, Optional


OPTIONAL_MARKER = "?"


@dataclass(frozen=True)
class _Step:
    """One position in the delimiter plan."""

    delimiter: str
    lookahead: Optional[str] = None  # set only for optional delimiters

    @property
    def is_optional(self) -> bool:
        return self.lookahead is not None


class Splitter:
    """
    Fixed-arity splitter driven by a delimiter pattern.

    Usage:
        authority = Splitter("?:/")
        host, port, tail = authority.split("localhost:8888/data/index.html")
    """

    def __init__(self, pattern: str):
        """
        Compile the pattern into steps.

        Args:
            pattern: Delimiter characters, in order. '?xy' marks an
                     optional delimiter x with lookahead y.

        Raises:
            ValueError: If the pattern is empty or a '?' is not followed
                        by two characters.
        """
        if not pattern:
            raise ValueError("Splitter pattern must not be empty")

        self.pattern = pattern
        self._steps = self._compile(pattern)

        # Every delimiter character closes exactly one field
        self.field_count = len(pattern.replace(OPTIONAL_MARKER, "")) + 1

    @staticmethod
    def _compile(pattern: str) -> tuple[_Step, ...]:
        steps = []
        chars = iter(pattern)
        for char in chars:
            if char != OPTIONAL_MARKER:
                steps.append(_Step(char))
                continue

            delimiter = next(chars, None)
            lookahead = next(chars, None)
            if delimiter is None or lookahead is None:
                raise ValueError(
                    f"Invalid splitter pattern {pattern!r}: "
                    f"'{OPTIONAL_MARKER}' needs a delimiter and a lookahead"
                )
            steps.append(_Step(delimiter, lookahead))
        return tuple(steps)

    def split(self, text: str) -> tuple[str, ...]:
        """
        Split text into exactly ``field_count`` fields.

        Never raises: missing delimiters simply produce empty fields, and
        the caller decides which empty fields are errors.
        """
        fields: list[str] = []
        current: list[str] = []

        steps: Iterator[_Step] = iter(self._steps)
        step: Optional[_Step] = next(steps, None)

        for char in text:
            if step is None:
                current.append(char)

            elif char == step.delimiter:
                fields.append("".join(current))
                current = []
                if step.is_optional:
                    # Optional delimiter seen; its lookahead is now required
                    step = _Step(step.lookahead)
                else:
                    step = next(steps, None)

            elif step.is_optional and char == step.lookahead:
                # Optional delimiter skipped: close the field and pad
                fields.append("".join(current))
                fields.append("")
                current = []
                step = next(steps, None)

            else:
                current.append(char)

        fields.append("".join(current))
        if step is not None and step.is_optional:
            fields.append("")

        fields.extend("" for _ in range(self.field_count - len(fields)))
        return tuple(fields)

    def __repr__(self) -> str:
        return f"Splitter({self.pattern!r})"
