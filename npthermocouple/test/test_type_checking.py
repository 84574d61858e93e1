"""Test that a static type checker rejects mixing up voltages and temperatures"""

import os
import textwrap

from mypy import api as mypy_api

import npthermocouple


project_root = os.path.dirname(os.path.dirname(os.path.abspath(npthermocouple.__file__)))


def test_same_kind_operations_type_check(tmp_path, monkeypatch):
    output, status = _type_check(tmp_path, monkeypatch, """
        from npthermocouple import Temperature, Voltage, sense_temperature, sense_voltage

        compensated = Voltage(1.1) + Voltage(1.0)
        difference = Temperature(100.0) - Temperature(25.0)
        is_hotter = Temperature(100.0) > Temperature(25.0)
        temperature = sense_temperature('K', Voltage(1.1), Temperature(25.0))
        voltage = sense_voltage('K', temperature, Temperature(25.0)) + compensated
        """)

    assert status == 0, output


def test_adding_voltage_to_temperature_is_rejected(tmp_path, monkeypatch):
    output, status = _type_check(tmp_path, monkeypatch, """
        from npthermocouple import Temperature, Voltage

        total = Voltage(1.0) + Temperature(1.0)
        """)

    assert status == 1
    assert 'Unsupported operand types for + ("Voltage" and "Temperature")' in output


def test_comparing_voltage_to_temperature_is_rejected(tmp_path, monkeypatch):
    output, status = _type_check(tmp_path, monkeypatch, """
        from npthermocouple import Temperature, Voltage

        is_less = Voltage(1.0) < Temperature(2.0)
        """)

    assert status == 1
    assert 'Unsupported operand types for < ("Voltage" and "Temperature")' in output


def test_swapped_conversion_arguments_are_rejected(tmp_path, monkeypatch):
    output, status = _type_check(tmp_path, monkeypatch, """
        from npthermocouple import Temperature, Voltage, sense_temperature

        temperature = sense_temperature('K', Temperature(1.0), Voltage(0.0))
        """)

    assert status == 1
    assert 'Argument 2 to "sense_temperature" has incompatible type "Temperature"; expected "Voltage"' in output
    assert 'Argument 3 to "sense_temperature" has incompatible type "Voltage"; expected "Temperature"' in output


def _type_check(tmp_path, monkeypatch, source):
    """ Run mypy on a snippet of code, resolving the package from the source tree
    """
    snippet_path = tmp_path / "snippet.py"
    snippet_path.write_text(textwrap.dedent(source))
    monkeypatch.chdir(project_root)
    stdout, stderr, status = mypy_api.run([
        str(snippet_path),
        '--cache-dir', str(tmp_path / 'mypy_cache'),
        '--no-color-output',
        '--show-error-codes',
    ])
    return stdout + stderr, status
