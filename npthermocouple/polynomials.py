""" Piecewise polynomial reference functions and their evaluation.

    A reference function is made of contiguous ranges, each with its own
    polynomial. Polynomials are evaluated with Horner's method, highest order
    coefficient first, which is the evaluation order the reference standard
    specifies.
"""

import numpy as np
import numpy.polynomial.polynomial as poly

from npthermocouple.exceptions import (
    OutOfRangeError, MissingCapabilityError, EXPONENTIAL_CORRECTION)
from npthermocouple.log import log_manager


log = log_manager.get_logger(__name__)


class Range(object):
    """ A range with inclusive start and inclusive end
    """
    def __init__(self, start, end):
        if start is None or end is None:
            raise ValueError("Both start and end must be provided")
        if start >= end:
            raise ValueError("start must be less than end")

        self.start = start
        self.end = end

    def within_range(self, value):
        return (self.start <= value) & (value <= self.end)

    def __repr__(self):
        return "Range(%r, %r)" % (self.start, self.end)


class ExponentialTerm(object):
    """ A correction term of the form a_0 * exp(a_1 * (x - a_2)^2) that is added
        to a polynomial
    """
    def __init__(self, a_0, a_1, a_2):
        self.a_0 = a_0
        self.a_1 = a_1
        self.a_2 = a_2

    def apply(self, x):
        return self.a_0 * np.exp(self.a_1 * np.square(x - self.a_2))

    def astype(self, dtype):
        scalar = np.dtype(dtype).type
        return ExponentialTerm(scalar(self.a_0), scalar(self.a_1), scalar(self.a_2))


class Polynomial(object):
    """ A single polynomial function with associated applicable range.
        Coefficients are ordered from the constant term upwards.
    """
    def __init__(self, applicable_range, coefficients, exponential_term=None):
        self.applicable_range = applicable_range
        self.coefficients = np.asarray(coefficients, dtype=np.float64)
        self.exponential_term = exponential_term

    @property
    def dtype(self):
        return self.coefficients.dtype

    def within_range(self, value):
        return self.applicable_range.within_range(value)

    def apply(self, x):
        # polyval uses Horner's method
        value = poly.polyval(x, self.coefficients)
        if self.exponential_term is None:
            return value
        return value + self.exponential_term.apply(x)

    def astype(self, dtype):
        """ Return a copy of this polynomial that evaluates at the given precision
        """
        polynomial = Polynomial(self.applicable_range, self.coefficients, self.exponential_term)
        polynomial.coefficients = self.coefficients.astype(dtype)
        if self.exponential_term is not None:
            polynomial.exponential_term = self.exponential_term.astype(dtype)
        return polynomial


class ReferenceFunction(object):
    """ Piecewise polynomial function for converting in one direction for one
        type of thermocouple

        :ivar polynomials: Polynomials ordered by their applicable ranges.
        :ivar domain_tolerance: Minimum slack allowed beyond the domain
            bounds when checking inputs.
        :ivar thermocouple_type: Type of thermocouple, used when reporting errors.
        :ivar direction: Direction of conversion, used when reporting errors.
    """
    def __init__(self, polynomials, domain_tolerance=0.0, thermocouple_type=None, direction=None):
        if len(polynomials) == 0:
            raise ValueError("At least one polynomial is required")
        _verify_contiguous(polynomials)
        self.polynomials = tuple(polynomials)
        self.domain_tolerance = domain_tolerance
        self.thermocouple_type = thermocouple_type
        self.direction = direction
        self._boundaries = np.array(
            [p.applicable_range.end for p in self.polynomials[:-1]],
            dtype=self.dtype)

    @property
    def dtype(self):
        return self.polynomials[0].dtype

    @property
    def valid_min(self):
        return self.polynomials[0].applicable_range.start

    @property
    def valid_max(self):
        return self.polynomials[-1].applicable_range.end

    @property
    def has_exponential_term(self):
        return any(p.exponential_term is not None for p in self.polynomials)

    def astype(self, dtype):
        """ Return a copy of this function that evaluates at the given precision
        """
        return ReferenceFunction(
            [p.astype(dtype) for p in self.polynomials],
            domain_tolerance=self.domain_tolerance,
            thermocouple_type=self.thermocouple_type,
            direction=self.direction)

    def select(self, values, tolerance=0.0, extrapolate=False):
        """ Find the index of the polynomial to use for each value.

            Each value uses the first range that contains it, so a value on a
            boundary shared by two ranges uses the lower one. Values outside the
            domain raise an :class:`OutOfRangeError`, unless extrapolating, in
            which case they use the first or last range. NaN values are not
            within any range and get an index of -1 when extrapolating.
        """
        values = np.asarray(values)
        indices = np.asarray(np.searchsorted(self._boundaries, values, side='left'))

        inside = (values >= self.valid_min - tolerance) & (values <= self.valid_max + tolerance)
        if np.all(inside):
            return indices

        if not extrapolate:
            offending = np.ravel(values)[np.logical_not(np.ravel(inside))][0]
            raise OutOfRangeError(
                self.thermocouple_type, self.direction, float(offending), self.valid_min, self.valid_max)

        log.debug(
            "Extrapolating %d value(s) outside [%s, %s] with the nearest range's polynomial, "
            "results are unvalidated",
            np.count_nonzero(np.logical_not(inside)), self.valid_min, self.valid_max)
        return np.where(np.isnan(values), -1, indices)

    def evaluate(self, values, tolerance=0.0, extrapolate=False, exponential_correction=True):
        """ Evaluate the reference function at each value

            :param values: Scalar or array of inputs.
            :param tolerance: Slack allowed beyond the domain bounds, in addition
                to this function's own domain tolerance.
            :param extrapolate: Evaluate values outside the domain with the
                polynomial of the nearest range instead of failing. This is an
                unvalidated approximation.
            :param exponential_correction: Whether exponential terms may be
                evaluated. If not, values that need one raise a
                :class:`MissingCapabilityError`.
        """
        values = np.asarray(values, dtype=self.dtype)
        tolerance = max(tolerance, self.domain_tolerance)
        indices = self.select(values, tolerance, extrapolate)

        conditions = [indices == i for i in range(len(self.polynomials))]
        if not exponential_correction:
            for polynomial, condition in zip(self.polynomials, conditions):
                if polynomial.exponential_term is not None and np.any(condition):
                    raise MissingCapabilityError(
                        EXPONENTIAL_CORRECTION, self.thermocouple_type, self.direction)
        functions = [p.apply for p in self.polynomials]
        functions.append(np.nan)  # Default value
        return np.piecewise(values, conditions, functions)


def _verify_contiguous(polynomials):
    prev_end = None
    for polynomial in polynomials:
        if prev_end is not None and polynomial.applicable_range.start != prev_end:
            raise ValueError("Polynomial ranges must be contiguous")
        prev_end = polynomial.applicable_range.end
