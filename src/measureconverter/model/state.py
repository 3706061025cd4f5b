"""
Converter State (View-Model)
============================
This module defines the selection state behind the converter screen.

Why is this file needed?
------------------------
1. State Management: It holds the active quantity, both unit lists, both
   selected units and the value being converted in one place.
2. Consistency: Every change keeps the selected units inside their lists and
   recomputes the result.
3. Decoupling: Views never touch the catalog. They read this object and
   subscribe to its change notifications, which are plain callbacks and
   carry no GUI dependency.

Classes:
    ConversionSelection: Data class with the raw selection fields.
    ConverterState: The view-model wrapping a ConversionSelection.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
import logging
from typing import Any, Callable, Optional, Protocol

import pint

from measureconverter.config import DEFAULT_QUANTITY, DEFAULT_FROM_UNIT, DEFAULT_TO_UNIT, DEFAULT_VALUE
from measureconverter.model.catalog import CatalogError, QuantityInfo, UnitNotFoundError
from measureconverter.model.lister import QuantityUnitLister

logger = logging.getLogger(__name__)

# (property_name, new_value)
ChangeCallback = Callable[[str, Any], None]


class ConvertingCatalog(Protocol):
    def find_quantity(self, quantity_name: str) -> Optional[QuantityInfo]: ...
    def quantity_names(self) -> list[str]: ...
    def convert(self, value: float, quantity_name: str, from_unit: str, to_unit: str) -> float: ...


@dataclass
class ConversionSelection:
    quantity_name: str
    from_units: list[str] = field(default_factory=list)
    to_units: list[str] = field(default_factory=list)
    current_from_unit: Optional[str] = None
    current_to_unit: Optional[str] = None
    value: float = DEFAULT_VALUE
    result: Optional[float] = None


class Observable:
    """Minimal property-changed notifier."""
    def __init__(self) -> None:
        self._subscribers: list[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register `callback`; returns a function that removes it again."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, property_name: str, value: Any) -> None:
        for callback in list(self._subscribers):
            callback(property_name, value)


class ConverterState(Observable):
    """
    View-model for converting a value between two units of one quantity.

    On construction both unit lists are loaded independently from the catalog
    and the literal default units are checked against them; a default that is
    not in its list is replaced by the list's first unit.

    Args:
        catalog: Injected catalog (QuantityCatalog or a test double).
        quantity_name: Initial quantity.
        from_unit, to_unit: Preferred initial selection.
        value: Initial input value.

    Raises:
        CategoryNotFoundError: If `quantity_name` is not in the catalog.
    """
    def __init__(
        self,
        catalog: ConvertingCatalog,
        quantity_name: str = DEFAULT_QUANTITY,
        from_unit: str = DEFAULT_FROM_UNIT,
        to_unit: str = DEFAULT_TO_UNIT,
        value: float = DEFAULT_VALUE,
    ) -> None:
        super().__init__()
        self.catalog = catalog
        self.lister = QuantityUnitLister(catalog)

        from_units = self.lister.list_unit_names(quantity_name)
        to_units = self.lister.list_unit_names(quantity_name)

        self._selection = ConversionSelection(
            quantity_name=quantity_name,
            from_units=from_units,
            to_units=to_units,
            current_from_unit=self._pick(quantity_name, from_units, from_unit),
            current_to_unit=self._pick(quantity_name, to_units, to_unit),
            value=float(value),
        )
        self._selection.result = self._compute_result()

    # --------------------------------------------------------------------------
    # Read access
    # --------------------------------------------------------------------------
    @property
    def quantity_name(self) -> str:
        return self._selection.quantity_name

    @property
    def from_units(self) -> list[str]:
        return self._selection.from_units

    @property
    def to_units(self) -> list[str]:
        return self._selection.to_units

    @property
    def current_from_unit(self) -> Optional[str]:
        return self._selection.current_from_unit

    @property
    def current_to_unit(self) -> Optional[str]:
        return self._selection.current_to_unit

    @property
    def value(self) -> float:
        return self._selection.value

    @property
    def result(self) -> Optional[float]:
        return self._selection.result

    def quantity_names(self) -> list[str]:
        return self.lister.list_quantity_names()

    def snapshot(self) -> ConversionSelection:
        """Copy of the current selection, safe to keep or mutate."""
        return replace(
            self._selection,
            from_units=list(self._selection.from_units),
            to_units=list(self._selection.to_units),
        )

    # --------------------------------------------------------------------------
    # Commands
    # --------------------------------------------------------------------------
    def set_quantity_name(self, quantity_name: str) -> None:
        """
        Switch to another quantity and reload both unit lists.

        Selected units that exist in the new lists are kept. Others reset to
        the quantity's own default pair, or to the first/second unit.

        Raises:
            CategoryNotFoundError: State is left untouched.
        """
        if quantity_name == self.quantity_name:
            return

        from_units = self.lister.list_unit_names(quantity_name)
        to_units = self.lister.list_unit_names(quantity_name)
        quantity = self.catalog.find_quantity(quantity_name)
        default_from = quantity.default_from if quantity else None
        default_to = quantity.default_to if quantity else None

        new_from = self._revalidate(from_units, self.current_from_unit, default_from, index=0)
        new_to = self._revalidate(to_units, self.current_to_unit, default_to, index=1)

        logger.info(f"Quantity changed: {self.quantity_name} -> {quantity_name}")
        self._set("quantity_name", quantity_name)
        self._set("from_units", from_units)
        self._set("to_units", to_units)
        self._set("current_from_unit", new_from)
        self._set("current_to_unit", new_to)
        self._update_result()

    def set_current_from_unit(self, unit_name: str) -> None:
        if unit_name not in self.from_units:
            raise UnitNotFoundError(self.quantity_name, unit_name)
        if self._set("current_from_unit", unit_name):
            self._update_result()

    def set_current_to_unit(self, unit_name: str) -> None:
        if unit_name not in self.to_units:
            raise UnitNotFoundError(self.quantity_name, unit_name)
        if self._set("current_to_unit", unit_name):
            self._update_result()

    def set_value(self, value: float) -> None:
        if self._set("value", float(value)):
            self._update_result()

    def swap_units(self) -> None:
        """Exchange the 'from' and 'to' selections."""
        old_from, old_to = self.current_from_unit, self.current_to_unit
        if old_from == old_to:
            return
        new_from = old_to if old_to in self.from_units else old_from
        new_to = old_from if old_from in self.to_units else old_to
        changed = self._set("current_from_unit", new_from)
        changed = self._set("current_to_unit", new_to) or changed
        if changed:
            self._update_result()

    # --------------------------------------------------------------------------
    # Internals
    # --------------------------------------------------------------------------
    def _set(self, property_name: str, value: Any) -> bool:
        if getattr(self._selection, property_name) == value:
            return False
        setattr(self._selection, property_name, value)
        self._notify(property_name, value)
        return True

    def _update_result(self) -> None:
        self._set("result", self._compute_result())

    def _compute_result(self) -> Optional[float]:
        s = self._selection
        if s.current_from_unit is None or s.current_to_unit is None:
            return None
        try:
            return self.catalog.convert(s.value, s.quantity_name, s.current_from_unit, s.current_to_unit)
        except (CatalogError, pint.errors.PintError) as e:
            logger.error(f"Conversion {s.current_from_unit} -> {s.current_to_unit} failed: {e}")
            return None

    @staticmethod
    def _pick(quantity_name: str, units: list[str], preferred: str) -> Optional[str]:
        if preferred in units:
            return preferred
        if not units:
            logger.warning(f"Quantity '{quantity_name}' has no units.")
            return None
        logger.warning(f"Default unit '{preferred}' not available, using '{units[0]}'.")
        return units[0]

    @staticmethod
    def _revalidate(units: list[str], current: Optional[str], default: Optional[str], index: int) -> Optional[str]:
        if current in units:
            return current
        if default in units:
            return default
        if not units:
            return None
        return units[min(index, len(units) - 1)]
