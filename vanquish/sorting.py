from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

NUMERIC = "numeric"
TEXT = "text"

ASC = "asc"
DESC = "desc"
SORT_DIRECTIONS = (ASC, DESC)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class SortField:
    accessor: Callable[[dict], Any]
    kind: str = TEXT


def parse_int(value: Any) -> int:
    """Leading integer of a numeric-ish value; missing or unparseable gives 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def text_key(value: Any) -> str:
    """Collation key approximating a locale compare: accents stripped, case folded."""
    text = "" if value is None else str(value)
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def _nested(*path: str) -> Callable[[dict], Any]:
    def get(record: dict) -> Any:
        value: Any = record
        for key in path:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        return value
    return get


CHARACTER_SORT_FIELDS: Dict[str, SortField] = {
    "name": SortField(_nested("name")),
    "power": SortField(_nested("powerstats", "power"), NUMERIC),
    "intelligence": SortField(_nested("powerstats", "intelligence"), NUMERIC),
    "publisher": SortField(_nested("biography", "publisher")),
    "alignment": SortField(_nested("biography", "alignment")),
}

COMIC_SORT_FIELDS: Dict[str, SortField] = {
    "title": SortField(_nested("title")),
    "date": SortField(_nested("releaseDate")),
    "issue": SortField(_nested("issueNumber"), NUMERIC),
}


def sort_records(
    records: List[dict],
    sort_by: Optional[str],
    direction: str = ASC,
    fields: Dict[str, SortField] = CHARACTER_SORT_FIELDS,
    default: Optional[str] = None,
) -> List[dict]:
    """Return a new list ordered by one field.

    Python's sort is stable in both directions, so equal keys keep their
    input order. With no usable field the input order is returned unchanged.
    """
    field = fields.get(sort_by or "") or (fields.get(default) if default else None)
    if field is None:
        return list(records)

    if field.kind == NUMERIC:
        def key(record: dict) -> Any:
            return parse_int(field.accessor(record))
    else:
        def key(record: dict) -> Any:
            return text_key(field.accessor(record))

    return sorted(records, key=key, reverse=(direction == DESC))


def paginate(records: List[dict], offset: int = 0, limit: Optional[int] = None) -> List[dict]:
    offset = max(0, offset or 0)
    if limit is None:
        return records[offset:]
    return records[offset:offset + max(0, limit)]
