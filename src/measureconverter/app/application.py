from __future__ import annotations

import logging
import os
import sys

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from measureconverter.config import (
    ORG_ID, APP_ID, VISIBLE_APP_NAME,
    DEFAULT_QUANTITY, DEFAULT_FROM_UNIT, DEFAULT_TO_UNIT,
    SETTINGS_QUANTITY, SETTINGS_FROM_UNIT, SETTINGS_TO_UNIT,
)
from measureconverter.model.catalog import CategoryNotFoundError
from measureconverter.model.state import ConverterState, ConvertingCatalog

logger = logging.getLogger(__name__)


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv if argv is None else argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app


def load_converter_state(catalog: ConvertingCatalog, settings: QSettings) -> ConverterState:
    """
    Build the view-model from the last saved selection.

    Falls back to the built-in defaults when the saved quantity no longer
    exists in the catalog. Saved units that are gone are handled by the
    view-model itself.
    """
    quantity = settings.value(SETTINGS_QUANTITY, DEFAULT_QUANTITY, type=str) or DEFAULT_QUANTITY
    from_unit = settings.value(SETTINGS_FROM_UNIT, DEFAULT_FROM_UNIT, type=str) or DEFAULT_FROM_UNIT
    to_unit = settings.value(SETTINGS_TO_UNIT, DEFAULT_TO_UNIT, type=str) or DEFAULT_TO_UNIT

    try:
        return ConverterState(catalog, quantity_name=quantity, from_unit=from_unit, to_unit=to_unit)
    except CategoryNotFoundError:
        logger.warning(f"Saved quantity '{quantity}' is not available, using '{DEFAULT_QUANTITY}'.")
        return ConverterState(catalog)


def save_converter_state(converter: ConverterState, settings: QSettings) -> None:
    settings.setValue(SETTINGS_QUANTITY, converter.quantity_name)
    settings.setValue(SETTINGS_FROM_UNIT, converter.current_from_unit or "")
    settings.setValue(SETTINGS_TO_UNIT, converter.current_to_unit or "")
    settings.sync()
    logger.debug("Selection saved to settings.")
