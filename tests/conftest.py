import os

# Must be set before pytest-qt creates the QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pint
import pytest

from measureconverter.model.catalog import QuantityCatalog, build_default_catalog
from measureconverter.model.quantities import QuantityDefinition, UnitDefinition
from measureconverter.model.state import ConverterState


@pytest.fixture(scope="session")
def registry() -> pint.UnitRegistry:
    return pint.UnitRegistry()


@pytest.fixture(scope="session")
def catalog() -> QuantityCatalog:
    return build_default_catalog()


@pytest.fixture(scope="session")
def fake_catalog(registry) -> QuantityCatalog:
    """Small catalog without the usual Meter/Centimeter defaults."""
    return QuantityCatalog(
        [
            QuantityDefinition(
                name="Distance",
                dimension="[length]",
                units=(
                    UnitDefinition("Foot", "foot"),
                    UnitDefinition("Inch", "inch"),
                    UnitDefinition("Yard", "yard"),
                ),
                default_from="Yard",
                default_to="Inch",
            ),
            QuantityDefinition(
                name="Length",
                dimension="[length]",
                units=(
                    UnitDefinition("Meter", "meter"),
                    UnitDefinition("Foot", "foot"),
                ),
            ),
            QuantityDefinition(
                name="Weight",
                dimension="[mass]",
                units=(
                    UnitDefinition("Gram", "gram"),
                    UnitDefinition("Kilogram", "kilogram"),
                ),
            ),
            QuantityDefinition(name="Empty", dimension="[time]", units=()),
        ],
        registry=registry,
    )


@pytest.fixture
def converter(catalog) -> ConverterState:
    return ConverterState(catalog)
