import re
from collections.abc import Mapping, Sequence

_CELL_BREAKS = re.compile(r"\r\n|[\t\r\n]")


def to_tsv(rows: Sequence[Mapping[str, object]], headers: Sequence[str]) -> str:
    """Encode rows as tab-separated text with a header line.

    Tabs and line breaks inside a cell are replaced with a single space.
    """
    lines = ["\t".join(_format_cell(header) for header in headers)]
    for row in rows:
        lines.append("\t".join(_format_cell(row.get(header)) for header in headers))
    return "\n".join(lines)


def _format_cell(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    return _CELL_BREAKS.sub(" ", text)
