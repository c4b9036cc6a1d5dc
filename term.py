from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union
from rational import Rational

Point = Union[Rational, float]

@dataclass(frozen=True)
class Term:
	coefficient: Rational = field(default_factory=lambda: Rational(0,1))
	degree: int = 0
	def is_zero(self) -> bool:
		return self.coefficient.is_zero()
	def is_constant(self) -> bool:
		return self.degree == 0
	def evaluate(self, x: Point) -> Point:
		# negative degrees collapse to the zero-power case
		exp = max(self.degree, 0)
		if isinstance(x, Rational):
			return self.coefficient * x.power(exp)
		return self.coefficient * (float(x) ** exp)
	def __neg__(self) -> Term:
		return Term(-self.coefficient, self.degree)
	def to_string(self) -> str:
		if self.degree == 0:
			return self.coefficient.to_string()
		sign = "" if self.coefficient.is_positive() else "-"
		magnitude = abs(self.coefficient)
		coeff_part = "" if magnitude == Rational(1,1) else magnitude.to_string()
		if self.degree == 1:
			return f"{sign}{coeff_part}x"
		return f"{sign}{coeff_part}x^{self.degree}"
	def __str__(self) -> str:
		return self.to_string()
