"""Field resolver: first populated alias wins."""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from weatherboard.models.common import Quantity
from weatherboard.normalize.aliases import ALIASES, TEXT_QUANTITIES, AliasTable


def resolve(
    quantity: Quantity,
    record: Any,
    index: Any,
    default: Any = None,
    aliases: AliasTable | None = None,
) -> Any:
    """Resolve a logical quantity at a sample index from a provider record.

    Walks the quantity's aliases in priority order and returns
    ``record[alias][index]`` for the first alias whose array exists and
    holds a usable value at that index. Zero counts as a value.

    Never raises. A record that is not a mapping, an array that is not a
    sequence, a negative or non-integer index, an index past the end of the
    array, and values of the wrong type are all treated as absent, in which
    case ``default`` is returned.
    """
    if not isinstance(record, Mapping) or not _is_index(index):
        return default

    table = ALIASES if aliases is None else aliases
    for alias in table.get(quantity, ()):
        values = record.get(alias)
        if not _is_array(values) or index >= len(values):
            continue
        value = values[index]
        if _usable(quantity, value):
            return value
    return default


def series_length(record: Any, key: str = "time") -> int:
    """Length of the alignment array in a record, 0 when missing or malformed."""
    if not isinstance(record, Mapping):
        return 0
    values = record.get(key)
    return len(values) if _is_array(values) else 0


def _is_index(index: Any) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and index >= 0


def _is_array(values: Any) -> bool:
    return isinstance(values, Sequence) and not isinstance(values, (str, bytes))


def _usable(quantity: Quantity, value: Any) -> bool:
    if value is None:
        return False
    if quantity in TEXT_QUANTITIES:
        return isinstance(value, str) and value != ""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)
