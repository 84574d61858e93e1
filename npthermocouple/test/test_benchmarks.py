import numpy as np
import pytest

from npthermocouple import Temperature, Voltage
from npthermocouple.config import Config
from npthermocouple.thermocouples import ThermocoupleSet, type_j, type_k


@pytest.mark.benchmark(group='sense-temperature')
def test_type_k_sense_temperature(benchmark):
    """ Benchmark converting a single measured voltage with cold junction compensation
    """
    temperature = benchmark(type_k.sense_temperature, Voltage(2.0), Temperature(25.0))

    assert abs(temperature.value - 73.58) < 0.01


@pytest.mark.benchmark(group='sense-temperature')
def test_type_j_sense_temperature(benchmark):
    """ Benchmark converting a single measured voltage with cold junction compensation
    """
    temperature = benchmark(type_j.sense_temperature, Voltage(2.0), Temperature(25.0))

    assert abs(temperature.value - 63.03) < 0.01


@pytest.mark.benchmark(group='sense-temperature')
def test_type_k_sense_temperature_single_precision(benchmark):
    """ Benchmark converting a single measured voltage using single precision tables
    """
    thermocouple = ThermocoupleSet(Config(precision='single'))['K']
    voltage = Voltage(2.0, np.float32)
    cold_junction = Temperature(25.0, np.float32)

    temperature = benchmark(thermocouple.sense_temperature, voltage, cold_junction)

    assert abs(float(temperature) - 73.58) < 0.25


@pytest.mark.benchmark(group='array-conversion')
def test_type_k_celsius_to_mv_array(benchmark):
    """ Benchmark converting an array of temperatures spanning all ranges
    """
    temperatures = np.linspace(-270.0, 1372.0, 1000000)

    voltages = benchmark(type_k.celsius_to_mv, temperatures)

    assert voltages.shape == temperatures.shape
    assert np.all(np.isfinite(voltages))


@pytest.mark.benchmark(group='array-conversion')
def test_type_k_mv_to_celsius_array(benchmark):
    """ Benchmark converting an array of voltages spanning all ranges
    """
    voltages = np.linspace(-5.891, 54.886, 1000000)

    temperatures = benchmark(type_k.mv_to_celsius, voltages)

    assert temperatures.shape == voltages.shape
    assert np.all(np.isfinite(temperatures))
