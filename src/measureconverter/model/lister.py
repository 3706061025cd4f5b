from __future__ import annotations

import logging
from typing import Optional, Protocol

from measureconverter.model.catalog import CategoryNotFoundError, QuantityInfo

logger = logging.getLogger(__name__)


class QuantityLookup(Protocol):
    """Anything that can resolve a quantity by name (QuantityCatalog, or a fake in tests)."""
    def find_quantity(self, quantity_name: str) -> Optional[QuantityInfo]: ...
    def quantity_names(self) -> list[str]: ...


class QuantityUnitLister:
    """Lists the unit names of a quantity category, in catalog order."""
    def __init__(self, catalog: QuantityLookup) -> None:
        self.catalog = catalog

    def list_unit_names(self, quantity_name: str) -> list[str]:
        """
        Return a new list with the display names of all units of `quantity_name`.

        Raises:
            CategoryNotFoundError: If the catalog has no such quantity.
        """
        quantity = self.catalog.find_quantity(quantity_name)
        if quantity is None:
            logger.warning(f"Quantity '{quantity_name}' requested but not in catalog.")
            raise CategoryNotFoundError(quantity_name)
        return [unit.name for unit in quantity.unit_infos]

    def list_quantity_names(self) -> list[str]:
        return self.catalog.quantity_names()
