import re
from typing import Optional, Any, Iterable, List, Protocol


_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')


def coerce_id(raw: Any) -> Optional[int]:
    """
    Coerce a path id to an integer the way the directories have always
    parsed ids: leading digits win ("2abc" -> 2), anything without leading
    digits yields None.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None

    match = _LEADING_INT.match(str(raw))
    if not match:
        return None
    return int(match.group(1))


class Repository(Protocol):
    """Read-only record source a directory service is built on."""

    def list_all(self) -> List[Any]:
        ...

    def get_by_id(self, raw_id: Any) -> Optional[Any]:
        ...


class InMemoryRepository:
    """
    Ordered, immutable set of records keyed by their ``id`` attribute.
    Stands in for persistent storage.
    """

    def __init__(self, records: Iterable[Any] = ()):
        self._records = tuple(records)

    def list_all(self) -> List[Any]:
        return list(self._records)

    def get_by_id(self, raw_id: Any) -> Optional[Any]:
        record_id = coerce_id(raw_id)
        if record_id is None:
            return None
        return next((r for r in self._records if r.id == record_id), None)

    def __len__(self) -> int:
        return len(self._records)
