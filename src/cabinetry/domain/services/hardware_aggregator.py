"""Hardware aggregation across the cabinets of one export.

Line items are keyed by SKU. The first occurrence of a SKU fixes its
position in the list; later additions only raise the quantity.
"""

from __future__ import annotations

from cabinetry.domain.entities import HardwareLineItem
from cabinetry.domain.value_objects import ProductCategory

HINGE_SKU = "HINGE-BLUM-SC"
HINGE_DESCRIPTION = "Blum Soft Close Hinge"
HANDLE_SKU = "HANDLE-STD"
HANDLE_DESCRIPTION = "Standard Handle"

HINGES_PER_CABINET: dict[ProductCategory, int] = {
    ProductCategory.TALL: 6,
    ProductCategory.WALL: 2,
}
DEFAULT_HINGES_PER_CABINET = 4


class HardwareAggregator:
    """Running hardware list for a single generation pass.

    Create one aggregator per export; instances are not shared between
    requests.
    """

    def __init__(self) -> None:
        self._items: dict[str, HardwareLineItem] = {}

    def add(self, sku: str, qty: int, description: str) -> None:
        """Add ``qty`` of ``sku``, merging into an existing line if present."""
        existing = self._items.get(sku)
        if existing is None:
            self._items[sku] = HardwareLineItem(sku=sku, qty=qty, description=description)
        else:
            self._items[sku] = HardwareLineItem(
                sku=sku, qty=existing.qty + qty, description=existing.description
            )

    def add_cabinet(self, category: ProductCategory, hinge: str | None) -> None:
        """Add the hardware one cabinet needs.

        Hinged cabinets get hinges by category; every cabinet gets a handle.
        """
        if hinge:
            count = HINGES_PER_CABINET.get(category, DEFAULT_HINGES_PER_CABINET)
            self.add(HINGE_SKU, count, HINGE_DESCRIPTION)
        self.add(HANDLE_SKU, 1, HANDLE_DESCRIPTION)

    @property
    def items(self) -> list[HardwareLineItem]:
        """Line items in order of first appearance."""
        return list(self._items.values())

    @property
    def total_count(self) -> int:
        """Total count of all hardware items."""
        return sum(item.qty for item in self._items.values())
