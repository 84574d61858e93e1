""" Build configuration: numeric storage width and optional capabilities.

    A configuration is fixed for the lifetime of a build of the conversion
    tables (see :class:`npthermocouple.thermocouples.ThermocoupleSet`), so
    conversions never branch on it per call. The process-wide default is read
    once from the environment when the package is imported.
"""

import os

import numpy as np


SINGLE = 'single'
DOUBLE = 'double'

PRECISION_ENV_VAR = 'NPTHERMOCOUPLE_PRECISION'
EXPONENTIAL_CORRECTION_ENV_VAR = 'NPTHERMOCOUPLE_EXPONENTIAL_CORRECTION'
EXTRAPOLATE_ENV_VAR = 'NPTHERMOCOUPLE_EXTRAPOLATE'
STRUCTURED_ENCODING_ENV_VAR = 'NPTHERMOCOUPLE_STRUCTURED_ENCODING'

_dtypes = {
    SINGLE: np.dtype('float32'),
    DOUBLE: np.dtype('float64'),
}

# Slack in mV allowed beyond the documented domain of the inverse functions
_domain_tolerances = {
    SINGLE: 0.005,
    DOUBLE: 0.0005,
}

_true_strings = ('1', 'true', 'yes', 'on')
_false_strings = ('0', 'false', 'no', 'off')


class Config(object):
    """ Numeric precision and capability flags for a build of the conversion tables

        :ivar precision: Either ``"single"`` or ``"double"``.
        :ivar exponential_correction: Whether the exponential correction term
            required by the Type K high temperature range can be evaluated.
        :ivar extrapolate: Whether inputs outside the tabulated domain are
            evaluated with the nearest range's polynomial instead of failing.
        :ivar structured_encoding: Whether quantities can be encoded to and
            decoded from plain data.
    """

    __slots__ = ('precision', 'exponential_correction', 'extrapolate', 'structured_encoding')

    def __init__(
            self, precision=DOUBLE, exponential_correction=True,
            extrapolate=False, structured_encoding=True):
        if precision not in _dtypes:
            raise ValueError(
                "Invalid precision '%s', expected one of: %s" % (precision, ", ".join(sorted(_dtypes))))
        object.__setattr__(self, 'precision', precision)
        object.__setattr__(self, 'exponential_correction', bool(exponential_correction))
        object.__setattr__(self, 'extrapolate', bool(extrapolate))
        object.__setattr__(self, 'structured_encoding', bool(structured_encoding))

    @staticmethod
    def from_environment(environ=None):
        """ Create a configuration from environment variables, using the
            defaults for any that are not set
        """
        if environ is None:
            environ = os.environ
        return Config(
            precision=environ.get(PRECISION_ENV_VAR, DOUBLE).strip().lower(),
            exponential_correction=_parse_flag(environ, EXPONENTIAL_CORRECTION_ENV_VAR, True),
            extrapolate=_parse_flag(environ, EXTRAPOLATE_ENV_VAR, False),
            structured_encoding=_parse_flag(environ, STRUCTURED_ENCODING_ENV_VAR, True))

    @property
    def dtype(self):
        """ NumPy dtype used to store and evaluate values
        """
        return _dtypes[self.precision]

    @property
    def domain_tolerance(self):
        return _domain_tolerances[self.precision]

    def replace(self, **changes):
        """ Return a copy of this configuration with some values changed
        """
        values = dict((name, getattr(self, name)) for name in self.__slots__)
        values.update(changes)
        return Config(**values)

    def __setattr__(self, name, value):
        raise AttributeError("Config is immutable")

    def _key(self):
        return tuple(getattr(self, name) for name in self.__slots__)

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return "Config(%s)" % ", ".join(
            "%s=%r" % (name, getattr(self, name)) for name in self.__slots__)


def _parse_flag(environ, name, default):
    try:
        value = environ[name]
    except KeyError:
        return default
    normalised = value.strip().lower()
    if normalised in _true_strings:
        return True
    if normalised in _false_strings:
        return False
    raise ValueError("Invalid value for %s: '%s'" % (name, value))


default_config = Config.from_environment()
