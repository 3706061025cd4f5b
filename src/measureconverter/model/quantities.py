"""Predefined Quantities (Catalog Definitions)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class UnitDefinition:
    """
    One selectable unit.

    `name` is the display name shown in the UI, `expression` is anything
    pint's `UnitRegistry.parse_units` accepts (e.g. "meter", "kilometer / hour").
    """
    name: str
    expression: str


@dataclass(frozen=True)
class QuantityDefinition:
    """
    A quantity category and its units, in display order.

    `dimension` is the pint dimensionality all units must share,
    e.g. "[length]" or "[mass] / [length] / [time] ** 2".
    """
    name: str
    dimension: str
    units: tuple[UnitDefinition, ...]
    default_from: Optional[str] = None
    default_to: Optional[str] = None


def _units(*pairs: tuple[str, str]) -> tuple[UnitDefinition, ...]:
    return tuple(UnitDefinition(name=name, expression=expr) for name, expr in pairs)


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------
# Unit lists are alphabetical by display name.
LENGTH = QuantityDefinition(
    name="Length",
    dimension="[length]",
    units=_units(
        ("Angstrom", "angstrom"),
        ("AstronomicalUnit", "astronomical_unit"),
        ("Centimeter", "centimeter"),
        ("Decimeter", "decimeter"),
        ("Fathom", "fathom"),
        ("Foot", "foot"),
        ("Inch", "inch"),
        ("Kilometer", "kilometer"),
        ("LightYear", "light_year"),
        ("Meter", "meter"),
        ("Micrometer", "micrometer"),
        ("Mile", "mile"),
        ("Millimeter", "millimeter"),
        ("Nanometer", "nanometer"),
        ("NauticalMile", "nautical_mile"),
        ("Parsec", "parsec"),
        ("Yard", "yard"),
    ),
    default_from="Meter",
    default_to="Centimeter",
)

MASS = QuantityDefinition(
    name="Mass",
    dimension="[mass]",
    units=_units(
        ("Gram", "gram"),
        ("Kilogram", "kilogram"),
        ("LongTon", "long_ton"),
        ("Microgram", "microgram"),
        ("Milligram", "milligram"),
        ("Ounce", "ounce"),
        ("Pound", "pound"),
        ("ShortTon", "short_ton"),
        ("Stone", "stone"),
        ("Tonne", "metric_ton"),
    ),
    default_from="Kilogram",
    default_to="Pound",
)

TEMPERATURE = QuantityDefinition(
    name="Temperature",
    dimension="[temperature]",
    units=_units(
        ("DegreeCelsius", "degree_Celsius"),
        ("DegreeFahrenheit", "degree_Fahrenheit"),
        ("DegreeRankine", "degree_Rankine"),
        ("Kelvin", "kelvin"),
    ),
    default_from="DegreeCelsius",
    default_to="DegreeFahrenheit",
)

DURATION = QuantityDefinition(
    name="Duration",
    dimension="[time]",
    units=_units(
        ("Day", "day"),
        ("Hour", "hour"),
        ("Microsecond", "microsecond"),
        ("Millisecond", "millisecond"),
        ("Minute", "minute"),
        ("Month", "month"),
        ("Nanosecond", "nanosecond"),
        ("Second", "second"),
        ("Week", "week"),
        ("Year", "year"),
    ),
    default_from="Hour",
    default_to="Minute",
)

AREA = QuantityDefinition(
    name="Area",
    dimension="[length] ** 2",
    units=_units(
        ("Acre", "acre"),
        ("Hectare", "hectare"),
        ("SquareCentimeter", "centimeter ** 2"),
        ("SquareFoot", "foot ** 2"),
        ("SquareInch", "inch ** 2"),
        ("SquareKilometer", "kilometer ** 2"),
        ("SquareMeter", "meter ** 2"),
        ("SquareMile", "mile ** 2"),
    ),
    default_from="SquareMeter",
    default_to="SquareFoot",
)

VOLUME = QuantityDefinition(
    name="Volume",
    dimension="[length] ** 3",
    units=_units(
        ("CubicCentimeter", "centimeter ** 3"),
        ("CubicFoot", "foot ** 3"),
        ("CubicMeter", "meter ** 3"),
        ("ImperialGallon", "imperial_gallon"),
        ("Liter", "liter"),
        ("Milliliter", "milliliter"),
        ("UsGallon", "gallon"),
        ("UsOunce", "fluid_ounce"),
    ),
    default_from="Liter",
    default_to="Milliliter",
)

SPEED = QuantityDefinition(
    name="Speed",
    dimension="[length] / [time]",
    units=_units(
        ("FootPerSecond", "foot / second"),
        ("KilometerPerHour", "kilometer / hour"),
        ("Knot", "knot"),
        ("MeterPerSecond", "meter / second"),
        ("MilePerHour", "mile / hour"),
    ),
    default_from="KilometerPerHour",
    default_to="MeterPerSecond",
)

PRESSURE = QuantityDefinition(
    name="Pressure",
    dimension="[mass] / [length] / [time] ** 2",
    units=_units(
        ("Atmosphere", "atmosphere"),
        ("Bar", "bar"),
        ("Kilopascal", "kilopascal"),
        ("Millibar", "millibar"),
        ("Pascal", "pascal"),
        ("PoundForcePerSquareInch", "psi"),
        ("Torr", "torr"),
    ),
    default_from="Bar",
    default_to="Kilopascal",
)

ENERGY = QuantityDefinition(
    name="Energy",
    dimension="[mass] * [length] ** 2 / [time] ** 2",
    units=_units(
        ("BritishThermalUnit", "Btu"),
        ("Calorie", "calorie"),
        ("Electronvolt", "electron_volt"),
        ("Joule", "joule"),
        ("Kilocalorie", "kilocalorie"),
        ("Kilojoule", "kilojoule"),
        ("KilowattHour", "kilowatt_hour"),
        ("WattHour", "watt_hour"),
    ),
    default_from="Kilojoule",
    default_to="Kilocalorie",
)

POWER = QuantityDefinition(
    name="Power",
    dimension="[mass] * [length] ** 2 / [time] ** 3",
    units=_units(
        ("BritishThermalUnitPerHour", "Btu / hour"),
        ("Kilowatt", "kilowatt"),
        ("MechanicalHorsepower", "horsepower"),
        ("Megawatt", "megawatt"),
        ("Watt", "watt"),
    ),
    default_from="Kilowatt",
    default_to="MechanicalHorsepower",
)

QUANTITY_DEFINITIONS: tuple[QuantityDefinition, ...] = (
    LENGTH,
    MASS,
    TEMPERATURE,
    DURATION,
    AREA,
    VOLUME,
    SPEED,
    PRESSURE,
    ENERGY,
    POWER,
)
