import os

from setuptools import setup


def read_version():
    here = os.path.abspath(os.path.dirname(__file__))
    version_path = os.path.sep.join((here, "npthermocouple", "version.py"))
    v_globals = {}
    v_locals = {}
    exec(open(version_path).read(), v_globals, v_locals)
    return v_locals['__version__']


setup(
  name = 'npThermocouple',
  version = read_version(),
  description = ("NumPy based thermocouple voltage and temperature conversions "
    "using the NIST ITS-90 reference functions."),
  packages = ['npthermocouple', 'npthermocouple.test'],
  package_data = {'npthermocouple': ['py.typed']},
  long_description=open('README.rst').read(),
  license = 'LGPL',
  classifiers = [
    'Development Status :: 4 - Beta',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Scientific/Engineering',
    'License :: OSI Approved :: GNU Library or Lesser General Public License (LGPL)',
    'Intended Audience :: Science/Research',
    'Natural Language :: English',
  ],
  install_requires = ['numpy'],
  extras_require = {
      'test': [
          'pytest>=3.1.0',
          'hypothesis',
          'pytest-benchmark',
          'mypy',
          'thermocouples_reference',
          # thermocouples_reference uses np.array(copy=False), which NumPy 2 rejects
          'numpy<2',
          'scipy',
      ],
  },
)
