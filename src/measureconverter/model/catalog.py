"""
Quantity Catalog
================
Read-only registry of quantity categories and their units, backed by pint.

Why is this file needed?
------------------------
1. Lookup: It answers "which units belong to quantity X" in a fixed order.
2. Validation: Every unit expression is parsed by pint once, at construction,
   and checked against the quantity's dimensionality.
3. Conversion: It hands the actual arithmetic to pint.

Classes:
    UnitInfo: One resolved unit (display name + pint unit).
    QuantityInfo: One resolved quantity category.
    QuantityCatalog: The catalog itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from typing import Iterable, Optional

import pint

from measureconverter.model.quantities import QuantityDefinition, QUANTITY_DEFINITIONS

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------------------
class CatalogError(Exception):
    """Base class for all catalog problems."""


class CategoryNotFoundError(CatalogError, LookupError):
    """The requested quantity category does not exist in the catalog."""
    def __init__(self, quantity_name: str) -> None:
        super().__init__(f"Quantity '{quantity_name}' not found in catalog.")
        self.quantity_name = quantity_name


class UnitNotFoundError(CatalogError, LookupError):
    """The requested unit does not belong to the given quantity."""
    def __init__(self, quantity_name: str, unit_name: str) -> None:
        super().__init__(f"Unit '{unit_name}' not found in quantity '{quantity_name}'.")
        self.quantity_name = quantity_name
        self.unit_name = unit_name


# ------------------------------------------------------------------------------
# Resolved records
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class UnitInfo:
    name: str
    expression: str
    units: pint.Unit


@dataclass(frozen=True)
class QuantityInfo:
    """A quantity category with its units resolved against a registry."""
    name: str
    dimension: str
    unit_infos: tuple[UnitInfo, ...]
    default_from: Optional[str] = None
    default_to: Optional[str] = None

    @property
    def unit_names(self) -> list[str]:
        return [u.name for u in self.unit_infos]

    def find_unit(self, unit_name: str) -> Optional[UnitInfo]:
        return next((u for u in self.unit_infos if u.name == unit_name), None)

    def get_unit(self, unit_name: str) -> UnitInfo:
        unit = self.find_unit(unit_name)
        if unit is None:
            raise UnitNotFoundError(self.name, unit_name)
        return unit


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
class QuantityCatalog:
    """
    Immutable collection of QuantityInfo, in definition order.

    Args:
        definitions: Quantity tables to resolve.
        registry: pint registry used for parsing and conversion. A fresh
            `pint.UnitRegistry()` is created when omitted.

    Raises:
        CatalogError: On duplicate names, unparsable unit expressions or
            units whose dimensionality does not match their quantity.
    """
    def __init__(
        self,
        definitions: Iterable[QuantityDefinition],
        registry: Optional[pint.UnitRegistry] = None,
    ) -> None:
        self._registry = registry if registry is not None else pint.UnitRegistry()
        quantities: list[QuantityInfo] = []
        for definition in definitions:
            if any(q.name == definition.name for q in quantities):
                raise CatalogError(f"Duplicate quantity '{definition.name}'.")
            quantities.append(self._resolve(definition))
        self._quantities: tuple[QuantityInfo, ...] = tuple(quantities)
        logger.debug(f"Catalog built with {len(self._quantities)} quantities.")

    @property
    def registry(self) -> pint.UnitRegistry:
        return self._registry

    @property
    def quantities(self) -> tuple[QuantityInfo, ...]:
        return self._quantities

    def quantity_names(self) -> list[str]:
        return [q.name for q in self._quantities]

    def find_quantity(self, quantity_name: str) -> Optional[QuantityInfo]:
        """Return the first quantity named `quantity_name`, or None."""
        return next((q for q in self._quantities if q.name == quantity_name), None)

    def get_quantity(self, quantity_name: str) -> QuantityInfo:
        quantity = self.find_quantity(quantity_name)
        if quantity is None:
            raise CategoryNotFoundError(quantity_name)
        return quantity

    def convert(self, value: float, quantity_name: str, from_unit: str, to_unit: str) -> float:
        """
        Convert `value` between two units of the same quantity.

        Raises:
            CategoryNotFoundError: Unknown quantity.
            UnitNotFoundError: Either unit is not part of the quantity.
            pint.errors.PintError: pint refused the conversion.
        """
        quantity = self.get_quantity(quantity_name)
        source = quantity.get_unit(from_unit)
        target = quantity.get_unit(to_unit)
        converted = self._registry.Quantity(value, source.units).to(target.units)
        return float(converted.magnitude)

    def _resolve(self, definition: QuantityDefinition) -> QuantityInfo:
        try:
            expected = self._registry.get_dimensionality(definition.dimension)
        except pint.errors.PintError as e:
            raise CatalogError(
                f"Invalid dimension '{definition.dimension}' for quantity '{definition.name}': {e}"
            ) from e

        unit_infos: list[UnitInfo] = []
        for unit_def in definition.units:
            if any(u.name == unit_def.name for u in unit_infos):
                raise CatalogError(f"Duplicate unit '{unit_def.name}' in quantity '{definition.name}'.")
            try:
                units = self._registry.parse_units(unit_def.expression)
            except pint.errors.PintError as e:
                raise CatalogError(
                    f"Cannot parse unit '{unit_def.expression}' ({definition.name}/{unit_def.name}): {e}"
                ) from e
            if units.dimensionality != expected:
                raise CatalogError(
                    f"Unit '{unit_def.name}' has dimension {units.dimensionality}, "
                    f"expected {expected} for quantity '{definition.name}'."
                )
            unit_infos.append(UnitInfo(name=unit_def.name, expression=unit_def.expression, units=units))

        return QuantityInfo(
            name=definition.name,
            dimension=definition.dimension,
            unit_infos=tuple(unit_infos),
            default_from=definition.default_from,
            default_to=definition.default_to,
        )


@lru_cache(maxsize=1)
def _default_catalog() -> QuantityCatalog:
    return QuantityCatalog(QUANTITY_DEFINITIONS)


def build_default_catalog(registry: Optional[pint.UnitRegistry] = None) -> QuantityCatalog:
    """
    Catalog of all predefined quantities.

    Without a registry the same instance is returned on every call.
    """
    if registry is None:
        return _default_catalog()
    return QuantityCatalog(QUANTITY_DEFINITIONS, registry=registry)
