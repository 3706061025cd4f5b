import pytest

from measureconverter.app.state import Store
from measureconverter.model.catalog import CategoryNotFoundError


@pytest.fixture
def store(qapp, converter):
    return Store(converter)


def test_quantity_change_emits_signals(qtbot, store):
    with qtbot.waitSignals(
        [store.quantity_name_changed, store.from_units_changed, store.current_from_unit_changed,
         store.result_changed],
        timeout=1000,
    ):
        store.select_quantity("Mass")
    assert store.converter.current_from_unit == "Kilogram"


def test_signal_arguments(qtbot, store):
    with qtbot.waitSignal(store.result_changed, timeout=1000) as blocker:
        store.set_value(4.0)
    assert blocker.args == [pytest.approx(400.0)]

    with qtbot.waitSignal(store.current_to_unit_changed, timeout=1000) as blocker:
        store.select_to_unit("Millimeter")
    assert blocker.args == ["Millimeter"]


def test_swap_emits(qtbot, store):
    with qtbot.waitSignal(store.current_from_unit_changed, timeout=1000) as blocker:
        store.swap_units()
    assert blocker.args == ["Centimeter"]


def test_errors_propagate(store):
    with pytest.raises(CategoryNotFoundError):
        store.select_quantity("Nonexistent")


def test_detach(qtbot, store):
    received = []
    store.value_changed.connect(received.append)
    store.detach()
    store.converter.set_value(9.0)
    assert received == []
