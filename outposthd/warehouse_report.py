"""Warehouse report data: status strings, filters, capacity totals and product rows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Hashable, Iterable, Mapping, Protocol, Sequence, TypeVar

from outposthd import constants


class StructureState(Enum):
    """Life-cycle state of a structure."""

    UNDER_CONSTRUCTION = "under_construction"
    OPERATIONAL = "operational"
    IDLE = "idle"
    DISABLED = "disabled"
    DESTROYED = "destroyed"


class WarehouseFilter(Enum):
    """The filter buttons of the warehouse report."""

    ALL = "all"
    SPACE_AVAILABLE = "space_available"
    FULL = "full"
    EMPTY = "empty"
    DISABLED = "disabled"


class StoragePool(Protocol):
    """What the report needs from a warehouse's product pool."""

    @property
    def capacity(self) -> int: ...

    def empty(self) -> bool: ...

    def at_capacity(self) -> bool: ...

    def available_storage(self) -> int: ...


class WarehouseLike(Protocol):
    """What the report needs from a warehouse."""

    @property
    def state(self) -> StructureState: ...

    @property
    def products(self) -> StoragePool: ...


WarehouseT = TypeVar("WarehouseT", bound=WarehouseLike)


_STATE_STRING_STATES = frozenset(
    {
        StructureState.DISABLED,
        StructureState.DESTROYED,
        StructureState.UNDER_CONSTRUCTION,
        StructureState.IDLE,
    }
)


def uses_state_string(state: StructureState) -> bool:
    """Whether a warehouse in ``state`` is listed by its state rather than its fill level."""
    return state in _STATE_STRING_STATES


def warehouse_status(
    warehouse: WarehouseLike, describe_state: Callable[[StructureState], str]
) -> str:
    """Return the status text shown next to a warehouse in the report list."""
    if uses_state_string(warehouse.state):
        return describe_state(warehouse.state)
    products = warehouse.products
    if products.empty():
        return constants.WAREHOUSE_EMPTY
    if products.at_capacity():
        return constants.WAREHOUSE_FULL
    return constants.WAREHOUSE_SPACE_AVAILABLE


@dataclass(frozen=True)
class CapacitySummary:
    """Totals over every warehouse; only operational ones add to storage."""

    count: int
    total_capacity: int
    available: int

    @property
    def used(self) -> int:
        return self.total_capacity - self.available

    @property
    def percent(self) -> float:
        """Fraction of total storage in use, 0.0 when there is no storage."""
        if self.total_capacity == 0:
            return 0.0
        return self.used / self.total_capacity


def compute_capacity(warehouses: Sequence[WarehouseLike]) -> CapacitySummary:
    """Sum the storage of all operational warehouses."""
    operational = [w for w in warehouses if w.state is StructureState.OPERATIONAL]
    return CapacitySummary(
        count=len(warehouses),
        total_capacity=sum(w.products.capacity for w in operational),
        available=sum(w.products.available_storage() for w in operational),
    )


def _working(warehouse: WarehouseLike) -> bool:
    return warehouse.state in (StructureState.OPERATIONAL, StructureState.IDLE)


def filter_warehouses(
    warehouses: Iterable[WarehouseT], mode: WarehouseFilter
) -> list[WarehouseT]:
    """Return the warehouses that the filter ``mode`` lists, in their original order."""
    if mode is WarehouseFilter.ALL:
        return list(warehouses)
    if mode is WarehouseFilter.SPACE_AVAILABLE:
        return [
            w
            for w in warehouses
            if not w.products.at_capacity() and not w.products.empty() and _working(w)
        ]
    if mode is WarehouseFilter.FULL:
        return [w for w in warehouses if w.products.at_capacity() and _working(w)]
    if mode is WarehouseFilter.EMPTY:
        return [w for w in warehouses if w.products.empty() and _working(w)]
    if mode is WarehouseFilter.DISABLED:
        return [
            w
            for w in warehouses
            if w.state in (StructureState.DISABLED, StructureState.DESTROYED)
        ]
    raise ValueError(f"unknown warehouse filter: {mode!r}")


@dataclass(frozen=True)
class ProductItem:
    """One row of the product list: description, quantity and share of capacity."""

    text: str
    count: int
    usage: float


def product_items(
    counts: Mapping[Hashable, int],
    capacity: int,
    describe: Callable[[Hashable], str],
) -> list[ProductItem]:
    """Build a row for every product with a positive count, in the order of ``counts``."""
    items: list[ProductItem] = []
    for product, count in counts.items():
        if count <= 0:
            continue
        if capacity <= 0:
            raise ValueError("capacity must be positive when products are stored")
        items.append(ProductItem(text=describe(product), count=count, usage=count / capacity))
    return items