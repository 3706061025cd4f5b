import pytest

from measureconverter.model.catalog import CategoryNotFoundError
from measureconverter.model.lister import QuantityUnitLister


def test_length_units(catalog):
    units = QuantityUnitLister(catalog).list_unit_names("Length")
    assert units
    assert "Meter" in units
    assert "Centimeter" in units
    assert units == catalog.get_quantity("Length").unit_names


def test_unknown_quantity_raises(catalog):
    with pytest.raises(CategoryNotFoundError):
        QuantityUnitLister(catalog).list_unit_names("Nonexistent")


def test_each_call_returns_new_list(catalog):
    lister = QuantityUnitLister(catalog)
    first = lister.list_unit_names("Mass")
    second = lister.list_unit_names("Mass")
    assert first == second
    assert first is not second


def test_injected_catalog(fake_catalog):
    lister = QuantityUnitLister(fake_catalog)
    assert lister.list_quantity_names() == ["Distance", "Length", "Weight", "Empty"]
    assert lister.list_unit_names("Distance") == ["Foot", "Inch", "Yard"]
    assert lister.list_unit_names("Empty") == []
