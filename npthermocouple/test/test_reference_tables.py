"""Test the NIST ITS-90 reference function tables"""

import numpy as np
import pytest

from npthermocouple.reference_tables import (
    REFERENCE_TABLES, Direction, ThermocoupleType, reference_functions)


# Type B has a minimum around 21 degrees Celsius, so its voltage is not
# monotonic at the bottom of its low temperature range
monotonic_minimum_temperature = {
    ThermocoupleType.B: 50.0,
}

forward_functions = [
    pytest.param(reference.forward, id="type %s forward" % reference.thermocouple_type.name)
    for reference in REFERENCE_TABLES]
inverse_functions = [
    pytest.param(reference.inverse, id="type %s inverse" % reference.thermocouple_type.name)
    for reference in REFERENCE_TABLES]


def test_tables_are_indexed_by_type():
    assert len(REFERENCE_TABLES) == len(ThermocoupleType)
    for thermocouple_type in ThermocoupleType:
        reference = REFERENCE_TABLES[thermocouple_type]
        assert reference.thermocouple_type == thermocouple_type
        assert reference.forward.thermocouple_type == thermocouple_type
        assert reference.forward.direction == Direction.TEMPERATURE_TO_VOLTAGE
        assert reference.inverse.direction == Direction.VOLTAGE_TO_TEMPERATURE


@pytest.mark.parametrize(
    "thermocouple_type,temperature_range,voltage_range",
    [
        (ThermocoupleType.B, (0.0, 1820.0), (0.291, 13.820)),
        (ThermocoupleType.E, (-270.0, 1000.0), (-8.825, 76.373)),
        (ThermocoupleType.J, (-210.0, 1200.0), (-8.095, 69.553)),
        (ThermocoupleType.K, (-270.0, 1372.0), (-5.891, 54.886)),
        (ThermocoupleType.N, (-270.0, 1300.0), (-3.990, 47.513)),
        (ThermocoupleType.R, (-50.0, 1768.1), (-0.226, 21.103)),
        (ThermocoupleType.S, (-50.0, 1768.1), (-0.235, 18.693)),
        (ThermocoupleType.T, (-270.0, 400.0), (-5.603, 20.872)),
    ])
def test_domains(thermocouple_type, temperature_range, voltage_range):
    reference = reference_functions(thermocouple_type)

    assert (reference.forward.valid_min, reference.forward.valid_max) == temperature_range
    assert (reference.inverse.valid_min, reference.inverse.valid_max) == voltage_range


def test_only_type_k_has_exponential_term():
    for reference in REFERENCE_TABLES:
        assert reference.forward.has_exponential_term == (reference.thermocouple_type == ThermocoupleType.K)
        assert not reference.inverse.has_exponential_term

    type_k_high_range = reference_functions(ThermocoupleType.K).forward.polynomials[-1]
    assert type_k_high_range.exponential_term.a_2 == 126.9686


def test_function_by_direction():
    reference = reference_functions('T')

    assert reference.function(Direction.TEMPERATURE_TO_VOLTAGE) is reference.forward
    assert reference.function(Direction.VOLTAGE_TO_TEMPERATURE) is reference.inverse
    assert repr(reference) == "ReferenceFunctions(T)"


@pytest.mark.parametrize("value", ["K", "k", " k ", ThermocoupleType.K])
def test_parse_type(value):
    assert ThermocoupleType.parse(value) is ThermocoupleType.K


@pytest.mark.parametrize("value", ["X", "", "KK", None, 3])
def test_parse_invalid_type(value):
    with pytest.raises(ValueError) as exc_info:
        ThermocoupleType.parse(value)
    assert "Unsupported thermocouple type" in str(exc_info.value)


@pytest.mark.parametrize("function", forward_functions)
def test_forward_polynomials_are_monotonic(function):
    minimum = monotonic_minimum_temperature.get(function.thermocouple_type)
    for polynomial in function.polynomials:
        start = polynomial.applicable_range.start
        if minimum is not None:
            start = max(start, minimum)
        temperatures = np.linspace(start, polynomial.applicable_range.end, 2000)
        voltages = polynomial.apply(temperatures)
        assert np.all(np.diff(voltages) > 0.0)


@pytest.mark.parametrize("function", inverse_functions)
def test_inverse_polynomials_are_monotonic(function):
    for polynomial in function.polynomials:
        voltages = np.linspace(polynomial.applicable_range.start, polynomial.applicable_range.end, 2000)
        temperatures = polynomial.apply(voltages)
        assert np.all(np.diff(temperatures) > 0.0)


@pytest.mark.parametrize("function", forward_functions)
def test_forward_polynomials_are_continuous(function):
    for lower, upper in zip(function.polynomials[:-1], function.polynomials[1:]):
        boundary = lower.applicable_range.end
        assert abs(lower.apply(boundary) - upper.apply(boundary)) < 1.0e-6


@pytest.mark.parametrize("function", inverse_functions)
def test_inverse_polynomials_are_continuous(function):
    """ The inverse functions are approximations so only agree to within their
        stated error at range boundaries
    """
    for lower, upper in zip(function.polynomials[:-1], function.polynomials[1:]):
        boundary = lower.applicable_range.end
        assert abs(lower.apply(boundary) - upper.apply(boundary)) < 0.1
