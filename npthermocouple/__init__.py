"""Module for converting between thermocouple voltage and temperature using the NIST ITS-90 reference functions"""

# Make version number available
from .version import __version_info__, __version__

# Export public objects
from .config import Config, default_config
from .exceptions import ConversionError, OutOfRangeError, MissingCapabilityError
from .reference_tables import ThermocoupleType, Direction
from .units import Voltage, Temperature
from .thermocouples import (
    Thermocouple, ThermocoupleSet, default_thermocouples,
    sense_temperature, voltage_for_temperature, sense_voltage)
