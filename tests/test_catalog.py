import pytest

from measureconverter.model.catalog import (
    CatalogError, CategoryNotFoundError, QuantityCatalog, UnitNotFoundError, build_default_catalog,
)
from measureconverter.model.quantities import QUANTITY_DEFINITIONS, QuantityDefinition, UnitDefinition


def test_quantity_names_follow_definition_order(catalog):
    assert catalog.quantity_names() == [d.name for d in QUANTITY_DEFINITIONS]
    assert catalog.quantity_names()[0] == "Length"


def test_length_contains_meter_and_centimeter(catalog):
    names = catalog.get_quantity("Length").unit_names
    assert "Meter" in names
    assert "Centimeter" in names


@pytest.mark.parametrize("definition", QUANTITY_DEFINITIONS, ids=lambda d: d.name)
def test_quantity_defaults_are_listed(catalog, definition):
    quantity = catalog.get_quantity(definition.name)
    assert quantity.default_from in quantity.unit_names
    assert quantity.default_to in quantity.unit_names
    assert quantity.unit_names == sorted(quantity.unit_names)


def test_find_quantity_returns_none_when_missing(catalog):
    assert catalog.find_quantity("Nonexistent") is None


def test_get_quantity_raises_typed_error(catalog):
    with pytest.raises(CategoryNotFoundError) as exc_info:
        catalog.get_quantity("Nonexistent")
    assert exc_info.value.quantity_name == "Nonexistent"
    assert isinstance(exc_info.value, LookupError)


def test_get_unit_raises_typed_error(catalog):
    length = catalog.get_quantity("Length")
    assert length.find_unit("Gram") is None
    with pytest.raises(UnitNotFoundError):
        length.get_unit("Gram")


@pytest.mark.parametrize(
    "quantity, value, source, target, expected",
    [
        ("Length", 1.0, "Meter", "Centimeter", 100.0),
        ("Length", 1.0, "Kilometer", "Meter", 1000.0),
        ("Length", 12.0, "Inch", "Foot", 1.0),
        ("Mass", 1.0, "Kilogram", "Gram", 1000.0),
        ("Temperature", 100.0, "DegreeCelsius", "DegreeFahrenheit", 212.0),
        ("Temperature", 0.0, "DegreeCelsius", "Kelvin", 273.15),
        ("Duration", 1.0, "Hour", "Minute", 60.0),
        ("Speed", 36.0, "KilometerPerHour", "MeterPerSecond", 10.0),
        ("Area", 1.0, "Hectare", "SquareMeter", 10000.0),
        ("Volume", 1.0, "Liter", "Milliliter", 1000.0),
        ("Energy", 1.0, "KilowattHour", "Kilojoule", 3600.0),
        ("Power", 1.0, "Kilowatt", "Watt", 1000.0),
        ("Pressure", 1.0, "Bar", "Kilopascal", 100.0),
    ],
)
def test_convert(catalog, quantity, value, source, target, expected):
    assert catalog.convert(value, quantity, source, target) == pytest.approx(expected)


def test_convert_unknown_names(catalog):
    with pytest.raises(CategoryNotFoundError):
        catalog.convert(1.0, "Nonexistent", "Meter", "Centimeter")
    with pytest.raises(UnitNotFoundError):
        catalog.convert(1.0, "Length", "Meter", "Gram")


def test_dimension_mismatch_is_rejected(registry):
    bad = QuantityDefinition("Length", "[length]", (UnitDefinition("Gram", "gram"),))
    with pytest.raises(CatalogError, match="Gram"):
        QuantityCatalog([bad], registry=registry)


def test_unparsable_expression_is_rejected(registry):
    bad = QuantityDefinition("Length", "[length]", (UnitDefinition("Bogus", "not_a_real_unit"),))
    with pytest.raises(CatalogError, match="Bogus"):
        QuantityCatalog([bad], registry=registry)


def test_duplicates_are_rejected(registry):
    meter = UnitDefinition("Meter", "meter")
    with pytest.raises(CatalogError, match="Duplicate unit"):
        QuantityCatalog([QuantityDefinition("Length", "[length]", (meter, meter))], registry=registry)

    length = QuantityDefinition("Length", "[length]", (meter,))
    with pytest.raises(CatalogError, match="Duplicate quantity"):
        QuantityCatalog([length, length], registry=registry)


def test_default_catalog_is_shared():
    assert build_default_catalog() is build_default_catalog()


def test_default_catalog_with_registry_is_new(registry):
    catalog = build_default_catalog(registry)
    assert catalog is not build_default_catalog()
    assert catalog.registry is registry
