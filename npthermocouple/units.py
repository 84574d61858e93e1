""" Unit-safe wrappers for the quantities used in thermocouple conversions.

    :class:`Voltage` and :class:`Temperature` are distinct types with no
    conversion between them. Arithmetic and ordering are only defined between
    two values of the same kind, so mixing them (for example adding a
    temperature to a voltage) is rejected by a static type checker and raises
    ``TypeError`` at run time.
"""

import operator
from typing import Optional

import numpy as np

from npthermocouple.config import default_config


class Quantity(object):
    """ A single floating point value of a physical quantity, stored as a
        NumPy scalar of a fixed width
    """

    __slots__ = ('_value',)

    unit: Optional[str] = None
    _format = "%f"

    def __init__(self, value, dtype=None):
        if isinstance(value, Quantity):
            raise TypeError(
                "Cannot create a %s from a %s" % (type(self).__name__, type(value).__name__))
        if np.ndim(value) != 0:
            raise TypeError("A %s holds a single value, not %r" % (type(self).__name__, value))
        if dtype is None:
            dtype = default_config.dtype
        object.__setattr__(self, '_value', np.dtype(dtype).type(value))

    @property
    def value(self):
        """ The wrapped value as a NumPy scalar
        """
        return self._value

    @property
    def dtype(self):
        return self._value.dtype

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __float__(self):
        return float(self._value)

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self._value)

    def __str__(self):
        return self._format % self._value

    def __hash__(self):
        return hash((type(self).__name__, float(self._value)))

    def __neg__(self):
        return type(self)(-self._value, self.dtype)

    def _combine(self, other, operation):
        if type(other) is not type(self):
            return NotImplemented
        if other.dtype != self.dtype:
            raise TypeError(
                "Cannot combine %s values stored as %s and %s" % (type(self).__name__, self.dtype, other.dtype))
        return type(self)(operation(self._value, other._value), self.dtype)

    def _compare(self, other, operation):
        if type(other) is not type(self):
            return NotImplemented
        return bool(operation(self._value, other._value))


class Voltage(Quantity):
    """ Thermoelectric potential in millivolts
    """

    __slots__ = ()

    unit = 'mV'
    _format = "%.3fmV"

    def __add__(self, other: 'Voltage') -> 'Voltage':
        return self._combine(other, operator.add)

    def __sub__(self, other: 'Voltage') -> 'Voltage':
        return self._combine(other, operator.sub)

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne)

    def __lt__(self, other: 'Voltage') -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: 'Voltage') -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: 'Voltage') -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: 'Voltage') -> bool:
        return self._compare(other, operator.ge)

    __hash__ = Quantity.__hash__


class Temperature(Quantity):
    """ Temperature in degrees Celsius
    """

    __slots__ = ()

    unit = 'degC'
    _format = "%.1f°C"

    def __add__(self, other: 'Temperature') -> 'Temperature':
        return self._combine(other, operator.add)

    def __sub__(self, other: 'Temperature') -> 'Temperature':
        return self._combine(other, operator.sub)

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq)

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne)

    def __lt__(self, other: 'Temperature') -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: 'Temperature') -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: 'Temperature') -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: 'Temperature') -> bool:
        return self._compare(other, operator.ge)

    __hash__ = Quantity.__hash__
