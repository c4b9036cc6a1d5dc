from __future__ import annotations
from fractions import Fraction
from math import gcd, isfinite
from typing import Set
import logging
import numpy as np

LOG = logging.getLogger(__name__)

# from_float gives up after this many scalings by 10
MAX_DECIMAL_DIGITS = 15
# ulps a scaled float may sit from an integer and still count as one
FLOAT_ULP_TOLERANCE = 4

class Rational:
	__slots__ = ("_num", "_den", "_positive")
	def __init__(self, num: int, den: int = 1, positive: bool = True) -> None:
		if den == 0:
			raise ZeroDivisionError(f"Rational({num}, 0)")
		# a signed num or den folds into the sign flag
		if num < 0:
			num, positive = -num, not positive
		if den < 0:
			den, positive = -den, not positive
		g = gcd(num, den)
		self._num = num // g
		self._den = den // g
		self._positive = positive or self._num == 0
	@staticmethod
	def from_int(value: int) -> Rational:
		return Rational(value, 1)
	@staticmethod
	def from_float(value: float, max_digits: int = MAX_DECIMAL_DIGITS) -> Rational:
		if not isfinite(value):
			raise ValueError(f"cannot convert {value!r} to Rational")
		for k in range(max_digits + 1):
			scaled = np.float64(value) * np.float64(10) ** k
			nearest = np.rint(scaled)
			if abs(scaled - nearest) <= FLOAT_ULP_TOLERANCE * abs(np.spacing(scaled)):
				LOG.debug("from_float(%r): settled after %d decimal digits", value, k)
				return Rational(int(nearest), 10**k)
		raise ValueError(f"{value!r} has no terminating expansion within {max_digits} decimal digits")
	@staticmethod
	def _coerce(other: object) -> Rational | None:
		if isinstance(other, Rational):
			return other
		if isinstance(other, int) and not isinstance(other, bool):
			return Rational(other, 1)
		return None
	def numerator(self) -> int:
		return self._num
	def denominator(self) -> int:
		return self._den
	def is_positive(self) -> bool:
		return self._positive
	def signed_numerator(self) -> int:
		return self._num if self._positive else -self._num
	def is_zero(self) -> bool:
		return self._num == 0
	def is_integral(self) -> bool:
		return self._den == 1
	def to_int(self) -> int:
		q = self._num // self._den
		return q if self._positive else -q
	def to_fraction(self) -> Fraction:
		return Fraction(self.signed_numerator(), self._den)
	def to_float(self) -> float:
		return self.signed_numerator() / self._den
	def __float__(self) -> float:
		return self.to_float()
	def add(self, other: Rational) -> Rational:
		total = self.signed_numerator() * other._den + other.signed_numerator() * self._den
		return Rational(total, self._den * other._den)
	def multiply(self, other: Rational) -> Rational:
		return Rational(self._num * other._num, self._den * other._den, self._positive == other._positive)
	def divide(self, other: Rational) -> Rational:
		if other.is_zero():
			raise ZeroDivisionError("division by zero")
		return Rational(self._num * other._den, self._den * other._num, self._positive == other._positive)
	def power(self, exponent: int) -> Rational:
		if exponent < 0:
			raise ValueError(f"negative exponent {exponent}")
		num, den = 1, 1
		for _ in range(exponent):
			num *= self._num
			den *= self._den
		return Rational(num, den, self._positive or exponent % 2 == 0)
	def __add__(self, other: object):
		if isinstance(other, float):
			return self.to_float() + other
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.add(r)
	__radd__ = __add__
	def __sub__(self, other: object):
		if isinstance(other, float):
			return self.to_float() - other
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.add(-r)
	def __rsub__(self, other: object):
		if isinstance(other, float):
			return other - self.to_float()
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return r.add(-self)
	def __mul__(self, other: object):
		if isinstance(other, float):
			return self.signed_numerator() * other / self._den
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.multiply(r)
	__rmul__ = __mul__
	def __truediv__(self, other: object):
		if isinstance(other, float):
			return self.signed_numerator() / (self._den * other)
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.divide(r)
	def __rtruediv__(self, other: object):
		if isinstance(other, float):
			return other * self._den / self.signed_numerator()
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return r.divide(self)
	def __neg__(self) -> Rational:
		return Rational(self._num, self._den, not self._positive)
	def __abs__(self) -> Rational:
		return Rational(self._num, self._den)
	def __pow__(self, exp: int) -> Rational:
		return self.power(exp)
	def compare(self, other: Rational) -> int:
		if self.is_zero() and other.is_zero():
			return 0
		if self._positive != other._positive:
			return 1 if self._positive else -1
		lhs = self._num * other._den
		rhs = other._num * self._den
		if lhs == rhs:
			return 0
		bigger = 1 if lhs > rhs else -1
		return bigger if self._positive else -bigger
	# floats compare by their exact binary value, as Fraction does
	def __eq__(self, other: object) -> bool:
		if isinstance(other, float):
			return self.to_fraction() == other
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.compare(r) == 0
	def __hash__(self) -> int:
		return hash(self.to_fraction())
	def __lt__(self, other: object) -> bool:
		if isinstance(other, float):
			return self.to_fraction() < other
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.compare(r) < 0
	def __le__(self, other: object) -> bool:
		if isinstance(other, float):
			return self.to_fraction() <= other
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.compare(r) <= 0
	def __gt__(self, other: object) -> bool:
		if isinstance(other, float):
			return self.to_fraction() > other
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.compare(r) > 0
	def __ge__(self, other: object) -> bool:
		if isinstance(other, float):
			return self.to_fraction() >= other
		r = Rational._coerce(other)
		if r is None:
			return NotImplemented
		return self.compare(r) >= 0
	def factors(self) -> Set[int]:
		# trial division, fine for the small coefficients root search sees
		if not self.is_integral():
			raise ValueError(f"factors of non-integral value {self}")
		n = self._num
		out: Set[int] = set()
		for d in range(1, n // 2 + 1):
			if n % d == 0:
				out.update((d, -d))
		if n:
			out.update((n, -n))
		return out
	def to_string(self) -> str:
		sign = "" if self._positive else "-"
		if self._den == 1:
			return f"{sign}{self._num}"
		return f"{sign}{self._num}/{self._den}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self.signed_numerator()}, {self._den})"
