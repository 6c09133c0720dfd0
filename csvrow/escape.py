"""Escaping of field values for embedding in a CSV row.

``escape`` is the inverse of the tokenizer's unescaping step: tokenizing
``escape(value)`` yields ``value`` again, provided the value has no line
break and no quote directly followed by the delimiter. The tokenizer reads
such a quote as the closing quote of the field.
"""

from __future__ import annotations

from collections.abc import Iterable

from csvrow.models import DEFAULT_DELIMITER, QUOTE

DOUBLED_QUOTE = QUOTE * 2


def escape(value: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Escape a value so it can be embedded in a CSV row.

    Parameters
    ----------
    value : str
        The raw field value.
    delimiter : str
        The delimiter used in the CSV document.

    Returns
    -------
    str
        The value wrapped in quotes with internal quotes doubled if it
        contains the delimiter or a quote; otherwise ``value`` itself.

    Notes
    -----
    A value with a quote directly followed by the delimiter, like the second
    example below, does not split back to itself: the tokenizer reads that
    quote as the closing quote of the field.

    Examples
    --------
    >>> escape("chupacabra")
    'chupacabra'
    >>> print(escape('this is a "test", of course...'))
    "this is a ""test"", of course..."
    """
    if delimiter in value or QUOTE in value:
        return QUOTE + value.replace(QUOTE, DOUBLED_QUOTE) + QUOTE
    return value


def unescape_field(raw: str) -> str:
    """Unescape a field taken verbatim from a row.

    Strips one enclosing pair of quotes when the field is properly quoted,
    then collapses doubled quotes into single ones.

    Parameters
    ----------
    raw : str
        A literal field as produced by ``CsvRow(..., literal=True)``.

    Returns
    -------
    str
        The unescaped value.

    Examples
    --------
    >>> print(unescape_field('"The ""Coder"" Man"'))
    The "Coder" Man
    >>> print(unescape_field('feb"ruary'))
    feb"ruary
    """
    if len(raw) > 1 and raw.startswith(QUOTE) and raw.endswith(QUOTE):
        raw = raw[1:-1]
    if DOUBLED_QUOTE in raw:
        return raw.replace(DOUBLED_QUOTE, QUOTE)
    return raw


def join_row(values: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Escape each value and join them into one row.

    Examples
    --------
    >>> print(join_row(["a", "b,c", 'd"e']))
    a,"b,c","d""e"
    """
    return delimiter.join(escape(value, delimiter) for value in values)
