"""Single-row CSV tokenizer and field escaper.

This library splits one line of delimiter-separated text into its fields
following RFC-4180 quoting rules, and escapes values for embedding in a row.
Splitting a document into lines is left to the caller.

Examples
--------
>>> from csvrow import CsvRow, escape, split_row

>>> list(CsvRow('january,"leap day, the",march'))
['january', 'leap day, the', 'march']

>>> split_row('a,"b ""c"" d"', literal=True)
['a', '"b ""c"" d"']

>>> escape("chupacabra")
'chupacabra'
>>> print(escape('say "hi", then go'))
"say ""hi"", then go"
"""

from csvrow.escape import escape, join_row, unescape_field
from csvrow.models import QUOTE, Dialect, FieldSpan
from csvrow.tokenizer import CsvRow, iter_spans, split_row

__all__ = [
    "QUOTE",
    "CsvRow",
    "Dialect",
    "FieldSpan",
    "escape",
    "iter_spans",
    "join_row",
    "split_row",
    "unescape_field",
]
