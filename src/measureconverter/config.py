"""
Configuration & Global Constants
================================
This module serves as the central registry for defaults and settings keys.

Why is this file needed?
------------------------
1. Defaults: The initial quantity/unit selection lives in one place instead of
   being repeated as literals in the view-model and the widgets.
2. Settings: Keys used with QSettings are defined once, so the panel that
   writes them and the window that restores them cannot drift apart.

Exports:
    DEFAULT_QUANTITY (str): Quantity selected on first start.
    DEFAULT_FROM_UNIT (str), DEFAULT_TO_UNIT (str): Initial unit selection.
    DEFAULT_VALUE (float): Initial input value.
"""

# Initial selection
DEFAULT_QUANTITY: str = "Length"
DEFAULT_FROM_UNIT: str = "Meter"
DEFAULT_TO_UNIT: str = "Centimeter"
DEFAULT_VALUE: float = 1.0

# Number of significant digits shown for results
RESULT_PRECISION: int = 10

# Application identity (used by QSettings)
ORG_ID: str = "measureconverter"
APP_ID: str = "measureconverter"
VISIBLE_APP_NAME: str = "Measure Converter"

# QSettings keys
SETTINGS_QUANTITY: str = "selection/quantity"
SETTINGS_FROM_UNIT: str = "selection/from_unit"
SETTINGS_TO_UNIT: str = "selection/to_unit"
