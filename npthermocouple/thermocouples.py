""" This module converts between temperature and voltage for type B, E, J, K, N, R, S, and T
    thermocouples using the piecewise polynomial reference functions from NIST (https://srdata.nist.gov/its90/main/).
    The approximate inverse functions are used to convert from voltage to temperature.

    Thermocouples measure the potential difference between the measuring junction and the
    reference (cold) junction, so converting a measured voltage to a temperature needs the cold
    junction temperature for compensation.
"""

from typing import Optional, Union

from npthermocouple.config import default_config
from npthermocouple.log import log_manager
from npthermocouple.reference_tables import REFERENCE_TABLES, ThermocoupleType
from npthermocouple.units import Temperature, Voltage


log = log_manager.get_logger(__name__)

DEFAULT_COLD_JUNCTION_TEMPERATURE = 25.0


class Thermocouple(object):
    """ Converts between temperature and voltage for a specific type of thermocouple given its reference functions

        :ivar thermocouple_type: The :class:`ThermocoupleType` converted.
        :ivar config: The :class:`Config` this conversion was built for.
    """

    def __init__(self, reference, config=None):
        if config is None:
            config = default_config
        self.thermocouple_type = reference.thermocouple_type
        self.description = reference.description
        self.config = config
        self._forward = reference.forward.astype(config.dtype)
        self._inverse = reference.inverse.astype(config.dtype)

    @property
    def temperature_range(self):
        """ Domain of the temperature to voltage conversion in degrees Celsius
        """
        return self._forward.valid_min, self._forward.valid_max

    @property
    def voltage_range(self):
        """ Domain of the voltage to temperature conversion in mV
        """
        return self._inverse.valid_min, self._inverse.valid_max

    def celsius_to_mv(self, temperature):
        """ Convert a temperature in degrees Celsius to a voltage in mV.
            Accepts a scalar or an array.
        """
        return self._forward.evaluate(
            temperature,
            extrapolate=self.config.extrapolate,
            exponential_correction=self.config.exponential_correction)

    def mv_to_celsius(self, voltage):
        """ Convert a voltage in mV to a temperature in degrees Celsius, without
            cold junction compensation. Accepts a scalar or an array.
        """
        return self._inverse.evaluate(
            voltage,
            tolerance=self.config.domain_tolerance,
            extrapolate=self.config.extrapolate)

    def voltage_for_temperature(self, temperature: Temperature) -> Voltage:
        """ Get the thermoelectric potential for a temperature, relative to a
            reference junction at 0 degrees Celsius
        """
        self._check_quantity(temperature, Temperature)
        return Voltage(self.celsius_to_mv(temperature.value), self.config.dtype)

    def temperature_for_voltage(self, voltage: Voltage) -> Temperature:
        """ Get the temperature for a thermoelectric potential relative to a
            reference junction at 0 degrees Celsius
        """
        self._check_quantity(voltage, Voltage)
        return Temperature(self.mv_to_celsius(voltage.value), self.config.dtype)

    def sense_temperature(self, voltage: Voltage, cold_junction: Optional[Temperature] = None) -> Temperature:
        """ Get the temperature of the measuring junction from a measured voltage

            :param voltage: Measured :class:`Voltage`.
            :param cold_junction: :class:`Temperature` of the reference junction.
                Defaults to 25 degrees Celsius.
        """
        self._check_quantity(voltage, Voltage)
        reference_temperature = self._cold_junction(cold_junction)
        compensated = voltage + self.voltage_for_temperature(reference_temperature)
        log.debug(
            "Type %s: measured %s with cold junction at %s, compensated voltage is %s",
            self.thermocouple_type.name, voltage, reference_temperature, compensated)
        return self.temperature_for_voltage(compensated)

    def sense_voltage(self, temperature: Temperature, cold_junction: Optional[Temperature] = None) -> Voltage:
        """ Get the voltage measured when the measuring junction is at a temperature

            :param temperature: :class:`Temperature` of the measuring junction.
            :param cold_junction: :class:`Temperature` of the reference junction.
                Defaults to 25 degrees Celsius.
        """
        reference_temperature = self._cold_junction(cold_junction)
        return self.voltage_for_temperature(temperature) - self.voltage_for_temperature(reference_temperature)

    def _cold_junction(self, cold_junction):
        if cold_junction is None:
            return Temperature(DEFAULT_COLD_JUNCTION_TEMPERATURE, self.config.dtype)
        return cold_junction

    def _check_quantity(self, value, kind):
        if not isinstance(value, kind):
            raise TypeError("Expected a %s but got %r" % (kind.__name__, value))
        if value.dtype != self.config.dtype:
            raise TypeError(
                "%r is stored as %s but this thermocouple uses %s" % (value, value.dtype, self.config.dtype))

    def __repr__(self):
        return "Thermocouple(%s)" % self.thermocouple_type.name


class ThermocoupleSet(object):
    """ Conversions for all supported types of thermocouple, built for one configuration
    """

    def __init__(self, config=None):
        if config is None:
            config = default_config
        self.config = config
        if config.extrapolate:
            log.warning(
                "Extrapolation is enabled, conversions outside the tabulated ranges "
                "are unvalidated approximations")
        # Indexed by ThermocoupleType value
        self._thermocouples = tuple(
            Thermocouple(reference, config) for reference in REFERENCE_TABLES)

    def __getitem__(self, thermocouple_type):
        return self._thermocouples[ThermocoupleType.parse(thermocouple_type)]

    def __iter__(self):
        return iter(self._thermocouples)

    def __len__(self):
        return len(self._thermocouples)

    def voltage(self, value):
        """ Create a :class:`Voltage` stored at this build's precision
        """
        return Voltage(value, self.config.dtype)

    def temperature(self, value):
        """ Create a :class:`Temperature` stored at this build's precision
        """
        return Temperature(value, self.config.dtype)

    def sense_temperature(self, thermocouple_type, measured, cold_junction):
        return self[thermocouple_type].sense_temperature(measured, cold_junction)

    def voltage_for_temperature(self, thermocouple_type, temperature):
        return self[thermocouple_type].voltage_for_temperature(temperature)

    def sense_voltage(self, thermocouple_type, temperature, cold_junction):
        return self[thermocouple_type].sense_voltage(temperature, cold_junction)


default_thermocouples = ThermocoupleSet(default_config)

type_b = default_thermocouples[ThermocoupleType.B]
type_e = default_thermocouples[ThermocoupleType.E]
type_j = default_thermocouples[ThermocoupleType.J]
type_k = default_thermocouples[ThermocoupleType.K]
type_n = default_thermocouples[ThermocoupleType.N]
type_r = default_thermocouples[ThermocoupleType.R]
type_s = default_thermocouples[ThermocoupleType.S]
type_t = default_thermocouples[ThermocoupleType.T]


def sense_temperature(
        thermocouple_type: Union[ThermocoupleType, str], measured: Voltage, cold_junction: Temperature) -> Temperature:
    """ Convert a measured voltage to the temperature of the measuring junction

        :param thermocouple_type: A :class:`ThermocoupleType` or type letter.
        :param measured: Measured :class:`Voltage`.
        :param cold_junction: :class:`Temperature` of the reference junction.
        :raises OutOfRangeError: If the cold junction temperature or the
            compensated voltage is outside the reference function's domain.
        :raises MissingCapabilityError: If converting needs the exponential
            correction and it is not enabled.
    """
    return default_thermocouples.sense_temperature(thermocouple_type, measured, cold_junction)


def voltage_for_temperature(thermocouple_type: Union[ThermocoupleType, str], temperature: Temperature) -> Voltage:
    """ Convert a temperature to the thermoelectric potential relative to a
        reference junction at 0 degrees Celsius
    """
    return default_thermocouples.voltage_for_temperature(thermocouple_type, temperature)


def sense_voltage(
        thermocouple_type: Union[ThermocoupleType, str], temperature: Temperature, cold_junction: Temperature) -> Voltage:
    """ Convert a measuring junction temperature to the voltage measured with
        the reference junction at the given cold junction temperature
    """
    return default_thermocouples.sense_voltage(thermocouple_type, temperature, cold_junction)
