"""Data models for single-row CSV tokenization.

This module defines the quote character, the dialect that configures a
tokenizer, and the positional field span produced by the span iterator.
"""

from dataclasses import dataclass

# The quote character is fixed; doubling it inside a quoted field escapes it.
QUOTE = '"'

DEFAULT_DELIMITER = ","


@dataclass(frozen=True)
class Dialect:
    """Row dialect: the delimiter and the output mode.

    Parameters
    ----------
    delimiter : str
        A single character separating fields (e.g., ",", ";", "\\t").
    literal : bool
        If True, fields are returned exactly as they appear in the line,
        enclosing and doubled quotes included.

    Raises
    ------
    ValueError
        If the delimiter is not exactly one character or is the quote
        character.

    Examples
    --------
    >>> Dialect(delimiter=";").delimiter
    ';'
    >>> Dialect(delimiter='"')
    Traceback (most recent call last):
        ...
    ValueError: Delimiter must differ from the quote character: '"'
    """

    delimiter: str = DEFAULT_DELIMITER
    literal: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            msg = f"Delimiter must be a single character: {self.delimiter!r}"
            raise ValueError(msg)
        if self.delimiter == QUOTE:
            msg = f"Delimiter must differ from the quote character: {self.delimiter!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class FieldSpan:
    """A raw field slice with its position in the line.

    Parameters
    ----------
    text : str
        The field exactly as it appears in the line.
    start : int
        Inclusive start offset (0-indexed, in characters).
    end : int
        Exclusive end offset.
    quoted : bool
        Whether the slice is a properly enclosed quoted field.

    Examples
    --------
    >>> span = FieldSpan(text='"a,b"', start=2, end=7, quoted=True)
    >>> span.end - span.start
    5
    """

    text: str
    start: int
    end: int
    quoted: bool = False
