""" Errors raised when a conversion cannot be performed
"""

EXPONENTIAL_CORRECTION = 'exponential-correction'
STRUCTURED_ENCODING = 'structured-encoding'


class ConversionError(Exception):
    """ Base class for errors raised by thermocouple conversions
    """


class OutOfRangeError(ConversionError, ValueError):
    """ An input lies outside every range of a reference function and
        extrapolation is disabled

        :ivar thermocouple_type: The :class:`ThermocoupleType` involved.
        :ivar direction: The :class:`Direction` of the conversion.
        :ivar input: The first offending input value.
        :ivar valid_min: Lower bound of the documented domain.
        :ivar valid_max: Upper bound of the documented domain.
    """
    def __init__(self, thermocouple_type, direction, input, valid_min, valid_max):
        self.thermocouple_type = thermocouple_type
        self.direction = direction
        self.input = input
        self.valid_min = valid_min
        self.valid_max = valid_max
        super(OutOfRangeError, self).__init__(
            "Input %r is outside the valid range [%r, %r] of the type %s %s conversion" % (
                input, valid_min, valid_max,
                _name(thermocouple_type), _name(direction).lower().replace('_', ' ')))


class MissingCapabilityError(ConversionError):
    """ A conversion needs a capability that is disabled in the configuration

        :ivar required: Name of the missing capability.
        :ivar thermocouple_type: The :class:`ThermocoupleType` involved, if any.
        :ivar direction: The :class:`Direction` of the conversion, if any.
    """
    def __init__(self, required, thermocouple_type=None, direction=None):
        self.required = required
        self.thermocouple_type = thermocouple_type
        self.direction = direction
        message = "The '%s' capability is required but is not enabled" % required
        if thermocouple_type is not None and direction is not None:
            message += " for the type %s %s conversion" % (
                _name(thermocouple_type), _name(direction).lower().replace('_', ' '))
        super(MissingCapabilityError, self).__init__(message)


def _name(value):
    return getattr(value, 'name', str(value))
