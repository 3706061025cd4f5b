from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from measureconverter.model.state import ConverterState

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Qt facade over ConverterState.

    Every change notification of the view-model is re-emitted as the
    matching `<property>_changed` signal so widgets can bind to it.
    """
    quantity_name_changed = Signal(str)
    from_units_changed = Signal(list)
    to_units_changed = Signal(list)
    current_from_unit_changed = Signal(object)
    current_to_unit_changed = Signal(object)
    value_changed = Signal(float)
    result_changed = Signal(object)

    def __init__(self, converter: ConverterState, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.converter = converter
        self._unsubscribe = converter.subscribe(self._on_converter_changed)

    def _on_converter_changed(self, property_name: str, value: Any) -> None:
        signal = getattr(self, f"{property_name}_changed", None)
        if signal is None:
            logger.debug(f"No signal for property '{property_name}'")
            return
        signal.emit(value)

    def detach(self) -> None:
        """Stop forwarding view-model notifications."""
        self._unsubscribe()

    # Commands are forwarded unchanged; lookup errors propagate to the caller.
    def select_quantity(self, quantity_name: str) -> None:
        self.converter.set_quantity_name(quantity_name)

    def select_from_unit(self, unit_name: str) -> None:
        self.converter.set_current_from_unit(unit_name)

    def select_to_unit(self, unit_name: str) -> None:
        self.converter.set_current_to_unit(unit_name)

    def set_value(self, value: float) -> None:
        self.converter.set_value(value)

    def swap_units(self) -> None:
        self.converter.swap_units()
