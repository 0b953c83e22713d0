"""
core/records.py -- Small pure transforms over lists of records.

Records are plain dicts by the time route handlers work with them.
extract_records() gets them there from whatever the data layer returned;
merge_fields() and ids_all_present() operate on the result.

None of these functions mutate their inputs.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any


def extract_records(rows: Iterable[Any]) -> list[dict[str, Any]]:
    """Convert data-layer rows into plain dicts.

    Accepts mappings, pydantic models (model_dump), dataclass instances, and
    SQLAlchemy Row objects (anything exposing ._mapping).
    """
    records: list[dict[str, Any]] = []
    for row in rows:
        if isinstance(row, Mapping):
            records.append(dict(row))
        elif hasattr(row, "model_dump"):
            records.append(row.model_dump())
        elif dataclasses.is_dataclass(row) and not isinstance(row, type):
            records.append(dataclasses.asdict(row))
        elif hasattr(row, "_mapping"):
            records.append(dict(row._mapping))
        else:
            raise TypeError(f"Cannot extract a record from {type(row).__name__}")
    return records


def merge_fields(items: Iterable[Mapping[str, Any]], extra_fields: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Return a new list where each item is shallow-merged with extra_fields.

    Keys in extra_fields win on conflict. Input order is preserved and the
    original items are left untouched.
    """
    return [{**item, **extra_fields} for item in items]


def _item_id(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id")
    return getattr(item, "id", None)


def ids_all_present(candidate_ids: Iterable[Any], reference_items: Iterable[Any]) -> bool:
    """Return True if every id in candidate_ids matches an item in reference_items.

    Matching is by id equality; order does not matter. An empty candidate
    list is trivially satisfied.
    """
    known = [_item_id(item) for item in reference_items]
    return all(candidate in known for candidate in candidate_ids)
