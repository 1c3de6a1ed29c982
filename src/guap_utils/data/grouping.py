"""
Module: data.grouping

Purpose:
    Partitions flat records into groups keyed by one attribute.
    Group order follows first appearance; records keep input order.

Key Functions:
    - group_by(): Group records by an attribute value
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from guap_utils.config import GROUP_DATA_FIELD
from .records import MISSING, get_field, is_record_sequence

logger = logging.getLogger(__name__)


def group_by(data: Any, key: Any) -> List[Dict[str, Any]]:
    """
    Group records by the value of ``key``.

    Each group is a dict ``{key: value, "allData": [records...]}``.
    Records without the attribute are grouped under MISSING, which is
    a different group from ``None`` or ``""``.

    Args:
        data: List or tuple of records
        key: Non-empty attribute name

    Returns:
        Groups in order of first appearance. [] if ``data`` is not a
        list/tuple, ``key`` is empty, or ``key`` is "allData" (it would
        collide with the records field of each group).

    Example:
        >>> rows = [{"type": "a", "v": 1}, {"type": "b", "v": 2}, {"type": "a", "v": 3}]
        >>> [(g["type"], len(g["allData"])) for g in group_by(rows, "type")]
        [('a', 2), ('b', 1)]
    """
    if not is_record_sequence(data) or not key or not isinstance(key, str):
        return []
    if key == GROUP_DATA_FIELD:
        logger.warning("group_by: key %r collides with the group records field", key)
        return []

    result: List[Dict[str, Any]] = []
    key_map: Dict[Any, Dict[str, Any]] = {}
    # Groups whose key value can't be hashed (lists, dicts) are matched by equality
    unhashable: List[Dict[str, Any]] = []

    for element in data:
        key_value = get_field(element, key)
        group = _find_group(key_map, unhashable, key, key_value)
        if group is None:
            group = {key: key_value, GROUP_DATA_FIELD: []}
            result.append(group)
            try:
                key_map[key_value] = group
            except TypeError:
                unhashable.append(group)
        group[GROUP_DATA_FIELD].append(element)

    logger.debug("group_by(%r): %d records -> %d groups", key, len(data), len(result))
    return result


def _find_group(
    key_map: Dict[Any, Dict[str, Any]],
    unhashable: List[Dict[str, Any]],
    key: str,
    key_value: Any,
) -> Dict[str, Any] | None:
    try:
        return key_map.get(key_value)
    except TypeError:
        pass
    for group in unhashable:
        if group[key] is not MISSING and group[key] == key_value:
            return group
    return None
