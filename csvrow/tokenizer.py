"""Single-row CSV field tokenizer.

This module splits one line of delimiter-separated text into fields,
honoring RFC-4180-style quoting: a quoted field may embed the delimiter,
and a doubled quote inside it stands for one literal quote.

Malformed quoting never raises. An orphaned quote is kept as content, and a
field whose opening quote closes early runs to the end of the line.
"""

from __future__ import annotations

from collections.abc import Iterator

from csvrow.escape import unescape_field
from csvrow.models import DEFAULT_DELIMITER, QUOTE, Dialect, FieldSpan


class CsvRow:
    """Lazy iterator over the fields of a single CSV line.

    The iterator makes one forward pass over the line and cannot be
    rewound or reused; create a new one per line.

    Parameters
    ----------
    line : str
        The line holding the delimited fields, without a line terminator.
    delimiter : str
        The single-character field delimiter.
    literal : bool
        If True, fields are yielded exactly as they appear in the line,
        enclosing and doubled quotes included. Otherwise quoted fields are
        unescaped.

    Raises
    ------
    ValueError
        If the delimiter is invalid (see :class:`Dialect`).

    Examples
    --------
    >>> list(CsvRow("a,b,c,d"))
    ['a', 'b', 'c', 'd']
    >>> list(CsvRow('x,"y, z","a""b"'))
    ['x', 'y, z', 'a"b']
    >>> list(CsvRow('x,"y, z"', ",", literal=True))
    ['x', '"y, z"']
    >>> list(CsvRow(""))
    []
    """

    def __init__(self, line: str, delimiter: str = DEFAULT_DELIMITER, literal: bool = False) -> None:
        self.line = line
        self.dialect = Dialect(delimiter=delimiter, literal=literal)
        self._pos = 0
        self._prev: str | None = None
        # An empty line has no fields at all, not one empty field.
        self._done = not line

    @classmethod
    def from_dialect(cls, line: str, dialect: Dialect) -> CsvRow:
        """Create a tokenizer for ``line`` using an existing dialect."""
        return cls(line, delimiter=dialect.delimiter, literal=dialect.literal)

    @property
    def delimiter(self) -> str:
        return self.dialect.delimiter

    @property
    def literal(self) -> bool:
        return self.dialect.literal

    @property
    def position(self) -> int:
        """Character offset where the next field starts."""
        return self._pos

    def __iter__(self) -> CsvRow:
        return self

    def __next__(self) -> str:
        span = self.next_span()
        if span is None:
            raise StopIteration
        if self.literal:
            return span.text
        return unescape_field(span.text)

    def next_span(self) -> FieldSpan | None:
        """Scan the next raw field and advance past it.

        Returns
        -------
        FieldSpan | None
            The raw field with its span, or None once the line is exhausted.
        """
        if self._done:
            return None

        line = self.line
        delimiter = self.delimiter
        start = self._pos
        end = len(line)
        assert 0 <= start <= end, f"cursor {start} outside line of length {end}"

        quoted = False
        terminated = False
        i = start

        while i < end:
            char = line[i]
            if i == start and char == QUOTE:
                quoted = True

            if char == delimiter:
                # Inside quotes, only a delimiter right after a closing quote
                # ends the field; a lone opening quote does not count.
                if not quoted or (i - start > 1 and self._prev == QUOTE):
                    terminated = True
                    break

            self._prev = char
            i += 1

        raw = line[start:i]
        # A field that opens with a quote but does not end with one is
        # taken literally.
        quoted = quoted and len(raw) > 1 and raw.endswith(QUOTE)

        if terminated:
            # Step over the delimiter; a trailing delimiter still opens one
            # more (empty) field.
            self._pos = i + 1
        else:
            self._pos = i
            self._done = True

        return FieldSpan(text=raw, start=start, end=i, quoted=quoted)


def split_row(line: str, delimiter: str = DEFAULT_DELIMITER, literal: bool = False) -> list[str]:
    """Split a line into its fields.

    Parameters
    ----------
    line : str
        The line to split. Should not include newline characters.
    delimiter : str
        The single-character field delimiter.
    literal : bool
        Return fields verbatim instead of unescaped.

    Returns
    -------
    list[str]
        The fields in order. Empty for an empty line.

    Examples
    --------
    >>> split_row("january,")
    ['january', '']
    >>> split_row('a;"b;c"', delimiter=";")
    ['a', 'b;c']
    """
    return list(CsvRow(line, delimiter=delimiter, literal=literal))


def iter_spans(line: str, delimiter: str = DEFAULT_DELIMITER) -> Iterator[FieldSpan]:
    """Yield the raw fields of a line together with their positions.

    Parameters
    ----------
    line : str
        The line to scan.
    delimiter : str
        The single-character field delimiter.

    Yields
    ------
    FieldSpan
        Raw field text, start (inclusive), end (exclusive), and whether the
        field is properly quoted.

    Examples
    --------
    >>> [(s.text, s.start, s.end) for s in iter_spans('ab,"c"')]
    [('ab', 0, 2), ('"c"', 3, 6)]
    """
    row = CsvRow(line, delimiter=delimiter, literal=True)
    span = row.next_span()
    while span is not None:
        yield span
        span = row.next_span()
