import sys

from csvrow import CsvRow, escape, iter_spans

line = 'january,"leap day, the","The ""Coder"" Man",feb"ruary'

# Unescaped fields
for field in CsvRow(line):
    sys.stdout.write(field + "\n")

# Raw fields with their column spans
for span in iter_spans(line):
    sys.stdout.write(f"{span.start:>3}-{span.end:<3} quoted={span.quoted} {span.text}\n")

# Escaping is the inverse of unescaping
sys.stdout.write(escape("leap day, the") + "\n")
