"""Folder-first sort orders and their persisted configuration strings.

Enum values are the internal stable identifiers. The configuration store holds
the camelCase spelling instead; the two are mapped one-to-one below.
"""

from __future__ import annotations

from enum import Enum


class SortOrder(Enum):
    """Directory listing order; directories always precede files."""

    FOLDER_FIRST_NAME_ASC = "folder-first-name-asc"
    FOLDER_FIRST_NAME_DESC = "folder-first-name-desc"
    FOLDER_FIRST_MODIFIED_ASC = "folder-first-modified-asc"
    FOLDER_FIRST_MODIFIED_DESC = "folder-first-modified-desc"

    @classmethod
    def default(cls) -> SortOrder:
        return cls.FOLDER_FIRST_NAME_ASC

    @property
    def by_modified_time(self) -> bool:
        return self in (SortOrder.FOLDER_FIRST_MODIFIED_ASC, SortOrder.FOLDER_FIRST_MODIFIED_DESC)

    @property
    def descending(self) -> bool:
        return self in (SortOrder.FOLDER_FIRST_NAME_DESC, SortOrder.FOLDER_FIRST_MODIFIED_DESC)


SORT_ORDER_CYCLE: tuple[SortOrder, ...] = (
    SortOrder.FOLDER_FIRST_NAME_ASC,
    SortOrder.FOLDER_FIRST_NAME_DESC,
    SortOrder.FOLDER_FIRST_MODIFIED_ASC,
    SortOrder.FOLDER_FIRST_MODIFIED_DESC,
)

_CONFIG_STRINGS: dict[SortOrder, str] = {
    SortOrder.FOLDER_FIRST_NAME_ASC: "folderFirstNameAsc",
    SortOrder.FOLDER_FIRST_NAME_DESC: "folderFirstNameDesc",
    SortOrder.FOLDER_FIRST_MODIFIED_ASC: "folderFirstModifiedAsc",
    SortOrder.FOLDER_FIRST_MODIFIED_DESC: "folderFirstModifiedDesc",
}
_SORT_ORDERS_BY_STRING: dict[str, SortOrder] = {value: key for key, value in _CONFIG_STRINGS.items()}

_LABELS: dict[SortOrder, str] = {
    SortOrder.FOLDER_FIRST_NAME_ASC: "Name ↑",
    SortOrder.FOLDER_FIRST_NAME_DESC: "Name ↓",
    SortOrder.FOLDER_FIRST_MODIFIED_ASC: "Modified ↑",
    SortOrder.FOLDER_FIRST_MODIFIED_DESC: "Modified ↓",
}

CONFIG_STRINGS: tuple[str, ...] = tuple(_CONFIG_STRINGS[order] for order in SORT_ORDER_CYCLE)


def sort_order_to_string(sort_order: SortOrder) -> str:
    """Return the configuration string persisted for ``sort_order``."""
    return _CONFIG_STRINGS[sort_order]


def string_to_sort_order(value: object) -> SortOrder:
    """Parse a configuration string; anything unrecognized yields the default order."""
    if not isinstance(value, str):
        return SortOrder.default()
    return _SORT_ORDERS_BY_STRING.get(value, SortOrder.default())


def next_sort_order(sort_order: SortOrder) -> SortOrder:
    """Return the order following ``sort_order`` in the toggle cycle."""
    index = SORT_ORDER_CYCLE.index(sort_order)
    return SORT_ORDER_CYCLE[(index + 1) % len(SORT_ORDER_CYCLE)]


def sort_order_label(sort_order: SortOrder) -> str:
    """Short human label for titles and status lines."""
    return _LABELS[sort_order]


__all__ = [
    "SortOrder",
    "SORT_ORDER_CYCLE",
    "CONFIG_STRINGS",
    "sort_order_to_string",
    "string_to_sort_order",
    "next_sort_order",
    "sort_order_label",
]
