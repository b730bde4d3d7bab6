"""Unit conversions.

Units convert through a common base. Within one non-metric system the
conversion goes through that system's own base unit (the yard, the ounce,
the fluid ounce...) so whole-number relationships such as 12 inches to the
foot stay exact; every other conversion goes through the SI base of the
dimension.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class ConversionError(ValueError):
    pass


class Dimension(str, Enum):
    Length = "length"
    Area = "area"
    Mass = "mass"
    Volume = "volume"
    Temperature = "temperature"
    Power = "power"
    Torque = "torque"
    Force = "force"
    Energy = "energy"


class System(str, Enum):
    Metric = "metric"
    Imperial = "imperial"
    US = "us"


Converter = Callable[[float], float]


@dataclass(frozen=True)
class Unit:
    name: str
    dimension: Dimension
    system: System = System.Metric
    to_base: Optional[Converter] = None
    from_base: Optional[Converter] = None
    to_system_base: Optional[Converter] = None
    from_system_base: Optional[Converter] = None

    def __str__(self) -> str:
        return self.name


def scaled(
    name: str,
    dimension: Dimension,
    factor: float,
    system: System = System.Metric,
    system_factor: Optional[float] = None,
) -> Unit:
    """A unit worth ``factor`` base units (and ``system_factor`` system base units)."""
    to_system_base = from_system_base = None
    if system_factor is not None:
        to_system_base = lambda v: v * system_factor  # noqa: E731
        from_system_base = lambda v: v / system_factor  # noqa: E731
    return Unit(
        name,
        dimension,
        system,
        lambda v: v * factor,
        lambda v: v / factor,
        to_system_base,
        from_system_base,
    )


YARDS_PER_METRE = 1.093613
METRES_PER_YARD = 1 / YARDS_PER_METRE

METRE = Unit("Metre", Dimension.Length)
CENTIMETRE = scaled("Centimetre", Dimension.Length, 1e-2)
MILLIMETRE = scaled("Millimetre", Dimension.Length, 1e-3)
MICROMETRE = scaled("Micrometre", Dimension.Length, 1e-6)
KILOMETRE = scaled("Kilometre", Dimension.Length, 1e3)
LIGHTYEAR = scaled("Lightyear", Dimension.Length, 9460730472580800.0)
PARSEC = scaled("Parsec", Dimension.Length, 30856775814913670.0)
YARD = scaled("Yard", Dimension.Length, METRES_PER_YARD, System.Imperial, 1.0)
FOOT = scaled("Foot", Dimension.Length, METRES_PER_YARD / 3, System.Imperial, 1 / 3)
INCH = scaled("Inch", Dimension.Length, METRES_PER_YARD / 36, System.Imperial, 1 / 36)
MILE = scaled("Mile", Dimension.Length, METRES_PER_YARD * 1760, System.Imperial, 1760.0)
NAUTICAL_MILE = scaled(
    "Nautical Mile", Dimension.Length, METRES_PER_YARD * 2025.373, System.Imperial, 2025.373
)

SQ_METRE = Unit("Sq Metre", Dimension.Area)
SQ_CENTIMETRE = scaled("Sq Centimetre", Dimension.Area, 1e-4)
SQ_MILLIMETRE = scaled("Sq Millimetre", Dimension.Area, 1e-6)
HECTARE = scaled("Hectare", Dimension.Area, 1e4)
SQ_KILOMETRE = scaled("Sq Kilometre", Dimension.Area, 1e6)
SQ_YARD = scaled("Sq Yard", Dimension.Area, METRES_PER_YARD**2, System.Imperial, 1.0)
SQ_FOOT = scaled("Sq Foot", Dimension.Area, (METRES_PER_YARD / 3) ** 2, System.Imperial, 1 / 9)
SQ_INCH = scaled(
    "Sq Inch", Dimension.Area, (METRES_PER_YARD / 36) ** 2, System.Imperial, 1 / 1296
)
ACRE = scaled("Acre", Dimension.Area, 4046.856422, System.Imperial, 4840.0)
SQ_MILE = scaled(
    "Sq Mile", Dimension.Area, (METRES_PER_YARD * 1760) ** 2, System.Imperial, 1760.0**2
)

OUNCES_PER_KILO = 35.2739619495804

KILOGRAM = Unit("Kilogram", Dimension.Mass)
GRAM = scaled("Gram", Dimension.Mass, 1e-3)
MILLIGRAM = scaled("Milligram", Dimension.Mass, 1e-6)
MICROGRAM = scaled("Microgram", Dimension.Mass, 1e-9)
TONNE = scaled("Tonne", Dimension.Mass, 1e3)
KILOTONNE = scaled("Kilotonne", Dimension.Mass, 1e6)
MEGATONNE = scaled("Megatonne", Dimension.Mass, 1e9)
OUNCE = scaled("Ounce", Dimension.Mass, 1 / OUNCES_PER_KILO, System.Imperial, 1.0)
POUND = scaled("Pound", Dimension.Mass, 16 / OUNCES_PER_KILO, System.Imperial, 16.0)
TON = scaled("Long Ton", Dimension.Mass, 2240 * 16 / OUNCES_PER_KILO, System.Imperial, 35840.0)
TON_SHORT = scaled(
    "Short Ton", Dimension.Mass, 2000 * 16 / OUNCES_PER_KILO, System.Imperial, 32000.0
)

LITRE = Unit("Litre", Dimension.Volume)
CUBIC_METRE = scaled("Cubic Metre", Dimension.Volume, 1e3)
CUBIC_CENTIMETRE = scaled("CC", Dimension.Volume, 1e-3)
KILOLITRE = scaled("Kilolitre", Dimension.Volume, 1e3)
MEGALITRE = scaled("Megalitre", Dimension.Volume, 1e6)
IMP_FL_OUNCE = scaled("Imp Fl Ounce", Dimension.Volume, 1 / 35.19507973, System.Imperial, 1.0)
IMP_PINT = scaled("Imp Pint", Dimension.Volume, 1 / 1.759753986, System.Imperial, 20.0)
IMP_QUART = scaled("Imp Quart", Dimension.Volume, 1 / 0.8798769932, System.Imperial, 40.0)
IMP_GALLON = scaled("Imp Gallon", Dimension.Volume, 1 / 0.2199692483, System.Imperial, 160.0)
US_FL_OUNCE = scaled("US Fl Ounce", Dimension.Volume, 1 / 33.81402270, System.US, 1.0)
US_PINT = scaled("US Pint", Dimension.Volume, 1 / 2.113376419, System.US, 16.0)
US_QUART = scaled("US Quart", Dimension.Volume, 1 / 1.056688209, System.US, 32.0)
US_GALLON = scaled("US Gallon", Dimension.Volume, 1 / 0.2641720524, System.US, 128.0)

CELSIUS = Unit("Celsius", Dimension.Temperature)
KELVIN = Unit(
    "Kelvin",
    Dimension.Temperature,
    to_base=lambda v: v - 273.15,
    from_base=lambda v: v + 273.15,
)
FAHRENHEIT = Unit(
    "Fahrenheit",
    Dimension.Temperature,
    to_base=lambda v: (v - 32.0) / 9.0 * 5.0,
    from_base=lambda v: v / 5.0 * 9.0 + 32.0,
)

WATT = Unit("Watt", Dimension.Power)
KILOWATT = scaled("Kilowatt", Dimension.Power, 1e3)
MEGAWATT = scaled("Megawatt", Dimension.Power, 1e6)
GIGAWATT = scaled("Gigawatt", Dimension.Power, 1e9)
HORSEPOWER = scaled("Horsepower", Dimension.Power, 745.699872, System.Imperial, 1.0)

NEWTON_METRE = Unit("Newton Metre", Dimension.Torque)
KILONEWTON_METRE = scaled("Kilonewton Metre", Dimension.Torque, 1e3)
MEGANEWTON_METRE = scaled("Meganewton Metre", Dimension.Torque, 1e6)
GIGANEWTON_METRE = scaled("Giganewton Metre", Dimension.Torque, 1e9)
FOOT_POUND = scaled("Foot Pound", Dimension.Torque, 1.3558179483314, System.Imperial, 1.0)
INCH_POUND = scaled(
    "Inch Pound", Dimension.Torque, 0.1129848290276167, System.Imperial, 1 / 12
)

NEWTON = Unit("Newton", Dimension.Force)
KILONEWTON = scaled("Kilonewton", Dimension.Force, 1e3)
MEGANEWTON = scaled("Meganewton", Dimension.Force, 1e6)
GIGANEWTON = scaled("Giganewton", Dimension.Force, 1e9)
POUND_FORCE = scaled("Pound Force", Dimension.Force, 4.4482216152605, System.Imperial, 1.0)
OUNCE_FORCE = scaled("Ounce Force", Dimension.Force, 0.278013851, System.Imperial, 1 / 16)

JOULES_PER_BTU = 1055.05585262
JOULES_PER_CALORIE = 4.184

JOULE = Unit("Joule", Dimension.Energy)
KILOJOULE = scaled("Kilojoule", Dimension.Energy, 1e3)
MEGAJOULE = scaled("Megajoule", Dimension.Energy, 1e6)
GIGAJOULE = scaled("Gigajoule", Dimension.Energy, 1e9)
KILOWATT_HOUR = scaled("Kilowatt Hour", Dimension.Energy, 3.6e6)
BTU = scaled("BTU", Dimension.Energy, JOULES_PER_BTU, System.Imperial, 1.0)
CALORIE = scaled(
    "Calorie",
    Dimension.Energy,
    JOULES_PER_CALORIE,
    System.Imperial,
    JOULES_PER_CALORIE / JOULES_PER_BTU,
)

UNITS = {
    Dimension.Length: [
        METRE, CENTIMETRE, MILLIMETRE, MICROMETRE, KILOMETRE, LIGHTYEAR, PARSEC,
        YARD, FOOT, INCH, MILE, NAUTICAL_MILE,
    ],
    Dimension.Area: [
        SQ_METRE, SQ_CENTIMETRE, SQ_MILLIMETRE, HECTARE, SQ_KILOMETRE,
        SQ_YARD, SQ_FOOT, SQ_INCH, ACRE, SQ_MILE,
    ],
    Dimension.Mass: [
        KILOGRAM, GRAM, MILLIGRAM, MICROGRAM, TONNE, KILOTONNE, MEGATONNE,
        OUNCE, POUND, TON, TON_SHORT,
    ],
    Dimension.Volume: [
        LITRE, CUBIC_METRE, CUBIC_CENTIMETRE, KILOLITRE, MEGALITRE,
        IMP_FL_OUNCE, IMP_PINT, IMP_QUART, IMP_GALLON,
        US_FL_OUNCE, US_PINT, US_QUART, US_GALLON,
    ],
    Dimension.Temperature: [CELSIUS, KELVIN, FAHRENHEIT],
    Dimension.Power: [WATT, KILOWATT, MEGAWATT, GIGAWATT, HORSEPOWER],
    Dimension.Torque: [
        NEWTON_METRE, KILONEWTON_METRE, MEGANEWTON_METRE, GIGANEWTON_METRE,
        FOOT_POUND, INCH_POUND,
    ],
    Dimension.Force: [
        NEWTON, KILONEWTON, MEGANEWTON, GIGANEWTON, POUND_FORCE, OUNCE_FORCE,
    ],
    Dimension.Energy: [
        JOULE, KILOJOULE, MEGAJOULE, GIGAJOULE, KILOWATT_HOUR, BTU, CALORIE,
    ],
}


def get_units(dimension: Dimension) -> list[Unit]:
    return list(UNITS[dimension])


def find_unit(name: str) -> Unit:
    wanted = name.strip().lower().replace("_", " ")
    for units in UNITS.values():
        for unit in units:
            if unit.name.lower() == wanted:
                return unit
    raise ConversionError(f"unknown unit '{name}'")


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    if from_unit == to_unit:
        return value
    if from_unit.dimension != to_unit.dimension:
        raise ConversionError(
            f"cannot convert {from_unit.dimension.value} ({from_unit}) "
            f"to {to_unit.dimension.value} ({to_unit})"
        )
    if from_unit.system == to_unit.system and from_unit.system != System.Metric:
        to_base, from_base = from_unit.to_system_base, to_unit.from_system_base
    else:
        to_base, from_base = from_unit.to_base, to_unit.from_base
    result = value
    if to_base is not None:
        result = to_base(result)
    if from_base is not None:
        result = from_base(result)
    return result
