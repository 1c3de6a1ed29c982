"""
Module: data.tree_builder

Purpose:
    Builds nested record trees from flat lists. Each record carries its
    own identifier and the identifier of its parent; matching children
    are attached under a configurable attribute.

Key Functions:
    - build_tree(): Link flat records into a forest of roots
    - flatten_tree(): Pre-order walk back to a flat list

Dependencies:
    - guap_utils.config: TreeConfig field names
    - data.records: MISSING sentinel and record access

Used By:
    - guap_utils.data: Public re-export
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from guap_utils.config import TreeConfig
from .records import (
    MISSING,
    copy_record,
    get_field,
    hashable_or_missing,
    is_record_sequence,
    set_field,
)

logger = logging.getLogger(__name__)


class CyclicStructureError(ValueError):
    """Raised when a record is its own ancestor in the linked tree."""

    def __init__(self, message: str, node_id: Any = MISSING):
        super().__init__(message)
        self.node_id = node_id


def build_tree(
    data: Any,
    id_field: Optional[str] = None,
    parent_id_field: Optional[str] = None,
    children_field: Optional[str] = None,
    *,
    in_place: bool = True,
    config: Optional[TreeConfig] = None,
) -> List[Any]:
    """
    Build a forest from flat records linked by id/parent-id fields.

    A record is a root when no record in ``data`` has an identifier equal
    to its parent identifier; records without a parent identifier are
    always roots. Every record whose identifier appears as another
    record's parent identifier gets those records, in input order, under
    ``children_field``. Records with no children get no children field.

    Identifiers should be unique. On duplicates the later record wins
    the identifier index; every duplicate still receives the children
    list for its identifier.

    Args:
        data: List or tuple of records. Anything else returns [].
        id_field: Identifier attribute (default "id")
        parent_id_field: Parent identifier attribute (default "parentId")
        children_field: Attribute children are attached under (default "children")
        in_place: Attach onto the given records (default). When False the
            records are shallow-copied first and ``data`` is untouched.
        config: Full TreeConfig; overrides the field arguments when given.

    Returns:
        Root records in input order, children attached.

    Raises:
        CyclicStructureError: If a record is one of its own ancestors,
            either through a duplicate id or a parent loop (A -> B -> A,
            or a record that is its own parent). Records are left
            untouched when this is raised.

    Example:
        >>> rows = [{"id": 1, "parentId": 0}, {"id": 2, "parentId": 1}]
        >>> build_tree(rows)
        [{'id': 1, 'parentId': 0, 'children': [{'id': 2, 'parentId': 1}]}]
    """
    if not is_record_sequence(data):
        return []

    cfg = config or TreeConfig.resolve(
        id_field, parent_id_field, children_field, in_place=in_place
    )
    records = list(data) if cfg.in_place else [copy_record(r) for r in data]

    children_map: Dict[Any, List[Any]] = {}
    node_ids: Dict[Any, Any] = {}
    parent_values: List[Any] = []
    duplicates = 0

    # Index records by parent id and by own id
    for record in records:
        parent_value = hashable_or_missing(get_field(record, cfg.parent_id_field))
        parent_values.append(parent_value)
        children_map.setdefault(parent_value, []).append(record)

        node_value = hashable_or_missing(get_field(record, cfg.id_field))
        if node_value is MISSING:
            continue
        if node_value in node_ids:
            duplicates += 1
        node_ids[node_value] = record

    if duplicates:
        logger.warning(
            "build_tree: %d duplicate %r value(s); later records win the index",
            duplicates, cfg.id_field,
        )

    roots = [
        record
        for record, parent_value in zip(records, parent_values)
        if parent_value is MISSING or parent_value not in node_ids
    ]

    reached, links = _collect_links(roots, children_map, cfg)

    for record in records:
        if id(record) not in reached:
            node_value = hashable_or_missing(get_field(record, cfg.id_field))
            raise CyclicStructureError(
                f"Cyclic structure: record with {cfg.id_field}={node_value!r} "
                f"is not reachable from any root (parent cycle)",
                node_id=node_value,
            )

    # Attach only once the whole input is known to be acyclic
    for node, kids in links:
        set_field(node, cfg.children_field, kids)

    logger.debug("build_tree: %d records -> %d roots", len(records), len(roots))
    return roots


def _collect_links(
    roots: Sequence[Any],
    children_map: Dict[Any, List[Any]],
    cfg: TreeConfig,
) -> Tuple[set[int], List[Tuple[Any, List[Any]]]]:
    """
    Walk from each root and pair every reached record with its children.

    Uses an explicit stack of (record, leaving) pairs so the current
    ancestor path is known without recursion.

    Returns:
        (ids of all records reached, (record, children) pairs to attach)
    """
    reached: set[int] = set()
    links: List[Tuple[Any, List[Any]]] = []
    on_path: set[int] = set()
    stack: List[Tuple[Any, bool]] = [(root, False) for root in reversed(roots)]

    while stack:
        node, leaving = stack.pop()
        key = id(node)
        if leaving:
            on_path.discard(key)
            continue

        node_value = hashable_or_missing(get_field(node, cfg.id_field))
        if key in on_path:
            raise CyclicStructureError(
                f"Cyclic structure: record with {cfg.id_field}={node_value!r} "
                f"is its own ancestor",
                node_id=node_value,
            )

        on_path.add(key)
        reached.add(key)
        stack.append((node, True))

        if node_value is MISSING:
            continue
        kids = children_map.get(node_value)
        if kids:
            links.append((node, kids))
            stack.extend((child, False) for child in reversed(kids))

    return reached, links


def iter_tree(roots: Sequence[Any], children_field: str = "children") -> Iterator[Any]:
    """
    Iterate over every record in a built forest (pre-order).

    Yields:
        Each root followed by its descendants, in children order.
    """
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        kids = get_field(node, children_field)
        if kids is not MISSING and kids:
            stack.extend(reversed(kids))


def flatten_tree(roots: Any, children_field: str = "children") -> List[Any]:
    """
    Flatten a forest produced by build_tree back into a list.

    Args:
        roots: Root records as returned by build_tree
        children_field: Attribute children were attached under

    Returns:
        All records in pre-order. Non-sequence input returns [].
    """
    if not is_record_sequence(roots):
        return []
    return list(iter_tree(roots, children_field))
