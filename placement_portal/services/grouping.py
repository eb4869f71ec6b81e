"""
Grouping Service
Nests flat record lists by one or more keys for navigation views.
Key order follows first appearance and records keep their input order.
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Tuple, Union

from placement_portal.services.event_status import parse_timestamp

UNKNOWN = "Unknown"
UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_BATCH = "Unknown Batch"

KeyFunc = Callable[[Mapping[str, Any]], Any]
KeySpec = Union[str, KeyFunc, Tuple[Union[str, KeyFunc], str]]


def _resolve(spec: KeySpec) -> Tuple[KeyFunc, str]:
    """A key spec is a field name, a function, or (either, fallback label)"""
    fallback = UNKNOWN
    if isinstance(spec, tuple):
        spec, fallback = spec
    if isinstance(spec, str):
        field = spec
        return (lambda record: record.get(field)), fallback
    return spec, fallback


def _key_for(record: Mapping[str, Any], key_func: KeyFunc, fallback: str) -> str:
    value = key_func(record)
    if value is None or (isinstance(value, str) and not value.strip()):
        return fallback
    return str(value)


def group_records(records: Iterable[Mapping[str, Any]], *key_specs: KeySpec) -> Dict[str, Any]:
    """
    Group records into nested dicts, one level per key spec.

    The innermost level holds lists of records. Records whose key is missing
    land in that key's fallback bucket, so nothing is dropped.

    Example:
        group_records(events, ("company", UNKNOWN_COMPANY), event_year)
        -> {"Acme": {"2024": [...]}, "Unknown Company": {"2023": [...]}}
    """
    if not key_specs:
        raise ValueError("At least one grouping key is required")

    resolved = [_resolve(spec) for spec in key_specs]
    grouped: Dict[str, Any] = {}

    for record in records:
        level = grouped
        for depth, (key_func, fallback) in enumerate(resolved):
            key = _key_for(record, key_func, fallback)
            if depth == len(resolved) - 1:
                level.setdefault(key, []).append(record)
            else:
                level = level.setdefault(key, {})

    return grouped


def count_grouped(grouped: Union[Dict[str, Any], List[Any]]) -> int:
    """Total number of records in a grouped mapping"""
    if isinstance(grouped, list):
        return len(grouped)
    return sum(count_grouped(child) for child in grouped.values())


def _year_sort_key(key: str):
    # Numeric years first, highest first; non-numeric labels such as Unknown last
    digits = "".join(ch for ch in key if ch.isdigit())
    if digits:
        return (0, -int(digits[:4]), key)
    return (1, 0, key)


def sort_years_descending(grouped: Dict[str, Any]) -> Dict[str, Any]:
    """Reorder the top level of a mapping keyed by year (or "Batch 2024") newest first"""
    return {key: grouped[key] for key in sorted(grouped, key=_year_sort_key)}


def event_year(record: Mapping[str, Any]):
    """Year of an event's start date, or None when it has none"""
    start = parse_timestamp(record.get("startDate", record.get("start_date")))
    return start.year if start else None

