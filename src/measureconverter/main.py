"""
Application Initialization
==========================
This module wires the view-model and the Qt view together and starts the
Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Builds the quantity catalog (the only place it is created).
2. Instantiates the view-model (ConverterState) with that catalog.
3. Wraps it in the Qt Store and passes the Store into the Main Window.
"""
import logging
import sys

from PySide6.QtCore import QSettings

from measureconverter.app.application import create_app, load_converter_state
from measureconverter.app.state import Store
from measureconverter.app.ui.main_window import MainWindow
from measureconverter.logging_config import setup_logging
from measureconverter.model.catalog import build_default_catalog


def main(argv: list[str] | None = None) -> int:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see everything during development
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app(argv)

    # 3. Initialize the Data Model
    catalog = build_default_catalog()
    settings = QSettings()
    converter = load_converter_state(catalog, settings)
    store = Store(converter)

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store, settings=settings)
    window.show()

    # 5. Start Event Loop
    return app.exec()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
