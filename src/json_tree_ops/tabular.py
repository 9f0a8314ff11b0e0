"""Conversion between row records and delimited text.

Each row is one flat mapping.  Output values are always double-quoted and
the header row is not; falsy or missing values render as empty text.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from json_tree_ops.tree.kinds import is_falsy

__all__ = ["csv_to_json", "json_to_csv"]


def _cell(value: Any) -> str:
    if is_falsy(value):
        return ""
    if isinstance(value, bool):
        return "true"
    return str(value)


def json_to_csv(
    rows: Sequence[Mapping[str, Any]],
    columns: Sequence[str],
    delimiter: str = ",",
) -> str:
    """Render ``rows`` as delimited text holding only ``columns``.

    Example::

        json_to_csv([{"a": 1, "b": 2}, {"a": 6}, {"b": 7}], ["a", "b"])
        # 'a,b\\n"1","2"\\n"6",""\\n"","7"'
    """
    lines = [delimiter.join(columns)]
    for row in rows:
        lines.append(delimiter.join(f'"{_cell(row.get(col))}"' for col in columns))
    return "\n".join(lines)


def csv_to_json(data: str, delimiter: str = ",") -> list[dict[str, str | None]]:
    """Parse delimited text into one dict per line, keyed by the header row.

    Values are not unquoted.  A line with fewer cells than the header gets
    None for the missing columns; extra cells are ignored.  Empty lines at
    the end of the text produce no records.

    Example::

        csv_to_json("col1;col2\\na;b\\nc;d", ";")
        # [{"col1": "a", "col2": "b"}, {"col1": "c", "col2": "d"}]
    """
    header, _, body = data.partition("\n")
    titles = header.split(delimiter)
    lines = body.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    records: list[dict[str, str | None]] = []
    for line in lines:
        values = line.split(delimiter)
        records.append(
            {
                title: values[i] if i < len(values) else None
                for i, title in enumerate(titles)
            }
        )
    return records
