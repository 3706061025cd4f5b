from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QGridLayout, QLabel, QComboBox,
    QDoubleSpinBox, QPushButton,
)

from measureconverter.app.state import Store
from measureconverter.app.ui.panels.base import BasePanel
from measureconverter.config import RESULT_PRECISION
from measureconverter.model.catalog import CatalogError

logger = logging.getLogger(__name__)

NO_RESULT = "–"


def format_result(result: Optional[float]) -> str:
    if result is None:
        return NO_RESULT
    return f"{result:.{RESULT_PRECISION}g}"


class ConverterPanel(BasePanel):
    """
    Panel with the quantity selector, both unit selectors, the value input
    and the converted result.

    User input goes to the Store; the widgets are refreshed only from the
    Store's signals.
    """
    status_message = Signal(str)

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        # quantity row
        self.group_quantity = QGroupBox("", self)
        root.addWidget(self.group_quantity, 0)
        sel = QGridLayout(self.group_quantity)
        self.label_quantity = QLabel(self.tr("Quantity:"), self.group_quantity)
        sel.addWidget(self.label_quantity, 0, 0)
        self.combo_quantity = QComboBox(self.group_quantity)
        sel.addWidget(self.combo_quantity, 0, 1)

        # conversion grid
        self.group_units = QGroupBox(self.tr("Conversion"), self)
        root.addWidget(self.group_units, 0)
        grid = QGridLayout(self.group_units)

        self.spin_value = QDoubleSpinBox(self.group_units)
        self.spin_value.setRange(-1e12, 1e12)
        self.spin_value.setDecimals(6)
        self.spin_value.setKeyboardTracking(False)
        grid.addWidget(QLabel(self.tr("Value:"), self.group_units), 0, 0)
        grid.addWidget(self.spin_value, 0, 1)

        self.combo_from = QComboBox(self.group_units)
        grid.addWidget(QLabel(self.tr("From:"), self.group_units), 1, 0)
        grid.addWidget(self.combo_from, 1, 1)

        self.button_swap = QPushButton(self.tr("Swap"), self.group_units)
        grid.addWidget(self.button_swap, 1, 2, 2, 1)

        self.combo_to = QComboBox(self.group_units)
        grid.addWidget(QLabel(self.tr("To:"), self.group_units), 2, 0)
        grid.addWidget(self.combo_to, 2, 1)

        self.label_result = QLabel(NO_RESULT, self.group_units)
        self.label_result.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        grid.addWidget(QLabel(self.tr("Result:"), self.group_units), 3, 0)
        grid.addWidget(self.label_result, 3, 1)

        root.addStretch()

        self._populate_from_store()

        # wiring: view -> store
        self.combo_quantity.currentTextChanged.connect(self._on_quantity_selected)
        self.combo_from.currentTextChanged.connect(self._on_from_selected)
        self.combo_to.currentTextChanged.connect(self._on_to_selected)
        self.spin_value.valueChanged.connect(self._on_value_changed)
        self.button_swap.clicked.connect(self._on_swap_clicked)

        # wiring: store -> view
        self.store.quantity_name_changed.connect(self._on_store_quantity_changed)
        self.store.from_units_changed.connect(self._on_store_from_units_changed)
        self.store.to_units_changed.connect(self._on_store_to_units_changed)
        self.store.current_from_unit_changed.connect(lambda unit: self._select_text(self.combo_from, unit))
        self.store.current_to_unit_changed.connect(lambda unit: self._select_text(self.combo_to, unit))
        self.store.value_changed.connect(self._on_store_value_changed)
        self.store.result_changed.connect(self._on_store_result_changed)

    def _populate_from_store(self) -> None:
        converter = self.store.converter
        self._fill_combo(self.combo_quantity, converter.quantity_names())
        self._select_text(self.combo_quantity, converter.quantity_name)
        self._fill_combo(self.combo_from, converter.from_units)
        self._select_text(self.combo_from, converter.current_from_unit)
        self._fill_combo(self.combo_to, converter.to_units)
        self._select_text(self.combo_to, converter.current_to_unit)
        self._on_store_value_changed(converter.value)
        self._on_store_result_changed(converter.result)

    # --------------------------------------------------------------------------
    # view -> store
    # --------------------------------------------------------------------------
    @Slot(str)
    def _on_quantity_selected(self, text: str) -> None:
        if text:
            self._dispatch(self.store.select_quantity, text)

    @Slot(str)
    def _on_from_selected(self, text: str) -> None:
        if text:
            self._dispatch(self.store.select_from_unit, text)

    @Slot(str)
    def _on_to_selected(self, text: str) -> None:
        if text:
            self._dispatch(self.store.select_to_unit, text)

    @Slot(float)
    def _on_value_changed(self, value: float) -> None:
        self.store.set_value(value)

    @Slot()
    def _on_swap_clicked(self) -> None:
        self.store.swap_units()

    def _dispatch(self, command, argument: str) -> None:
        try:
            command(argument)
        except CatalogError as e:
            logger.error(str(e))
            self.status_message.emit(str(e))

    # --------------------------------------------------------------------------
    # store -> view
    # --------------------------------------------------------------------------
    @Slot(str)
    def _on_store_quantity_changed(self, quantity_name: str) -> None:
        self._select_text(self.combo_quantity, quantity_name)
        self.status_message.emit(self.tr("Quantity: {0}").format(quantity_name))

    # Refill, then reselect the current unit (it may survive a quantity change)
    @Slot(list)
    def _on_store_from_units_changed(self, units: list[str]) -> None:
        self._fill_combo(self.combo_from, units)
        self._select_text(self.combo_from, self.store.converter.current_from_unit)

    @Slot(list)
    def _on_store_to_units_changed(self, units: list[str]) -> None:
        self._fill_combo(self.combo_to, units)
        self._select_text(self.combo_to, self.store.converter.current_to_unit)

    @Slot(float)
    def _on_store_value_changed(self, value: float) -> None:
        self.spin_value.blockSignals(True)
        self.spin_value.setValue(value)
        self.spin_value.blockSignals(False)

    @Slot(object)
    def _on_store_result_changed(self, result: Optional[float]) -> None:
        self.label_result.setText(format_result(result))

    @staticmethod
    def _fill_combo(combo: QComboBox, items: list[str]) -> None:
        combo.blockSignals(True)
        combo.clear()
        combo.addItems(items)
        combo.blockSignals(False)

    @staticmethod
    def _select_text(combo: QComboBox, text: Optional[str]) -> None:
        combo.blockSignals(True)
        combo.setCurrentIndex(combo.findText(text) if text is not None else -1)
        combo.blockSignals(False)
