""" Encode quantities to plain data structures and JSON, and decode them back
"""

import json

from npthermocouple.config import default_config
from npthermocouple.exceptions import MissingCapabilityError, STRUCTURED_ENCODING
from npthermocouple.units import Temperature, Voltage


_quantity_types = {
    'voltage': Voltage,
    'temperature': Temperature,
}


def encode(quantity, config=None):
    """ Encode a :class:`Voltage` or :class:`Temperature` as a dictionary
    """
    _require_structured_encoding(config)
    for name, quantity_type in _quantity_types.items():
        if type(quantity) is quantity_type:
            return {
                'quantity': name,
                'unit': quantity_type.unit,
                'value': float(quantity),
            }
    raise TypeError("Cannot encode %r" % (quantity, ))


def decode(data, config=None):
    """ Decode a dictionary created by :func:`encode`. The quantity is stored at
        the configured precision.
    """
    config = _require_structured_encoding(config)
    try:
        name = data['quantity']
        unit = data['unit']
        value = data['value']
    except KeyError as error:
        raise ValueError("Encoded quantity is missing the %s field" % error)
    try:
        quantity_type = _quantity_types[name]
    except KeyError:
        raise ValueError("Unknown quantity: %r" % (name, ))
    if unit != quantity_type.unit:
        raise ValueError("Expected unit '%s' for %s but got '%s'" % (quantity_type.unit, name, unit))
    return quantity_type(float(value), config.dtype)


def dumps(quantity, config=None, **kwargs):
    """ Encode a quantity as a JSON string
    """
    return json.dumps(encode(quantity, config), **kwargs)


def loads(text, config=None):
    """ Decode a quantity from a JSON string created by :func:`dumps`
    """
    _require_structured_encoding(config)
    return decode(json.loads(text), config)


def _require_structured_encoding(config):
    if config is None:
        config = default_config
    if not config.structured_encoding:
        raise MissingCapabilityError(STRUCTURED_ENCODING)
    return config
