from __future__ import annotations
from typing import Dict, List, Set, Tuple, Iterable, Union
from dataclasses import dataclass
import logging
from term import Term, Point
from rational import Rational

LOG = logging.getLogger(__name__)

Coefficient = Union[Rational, int]


@dataclass(frozen=True)
class Polynomial:
    """Sum of single-variable terms with rational coefficients.

    Terms are canonicalized on construction: equal degrees are merged,
    zero coefficients dropped, and the rest sorted by degree descending.
    The instance is frozen and ``terms`` is a tuple.
    """

    terms: Tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "terms", self._canonical(self.terms))

    @staticmethod
    def from_pairs(pairs: Iterable[Tuple[Coefficient, int]]) -> "Polynomial":
        terms = []
        for coeff, degree in pairs:
            if isinstance(coeff, int):
                coeff = Rational(coeff, 1)
            terms.append(Term(coeff, degree))
        return Polynomial(terms)

    @staticmethod
    def _canonical(raw: Iterable[Term]) -> Tuple[Term, ...]:
        # combine like terms
        acc: Dict[int, Rational] = {}
        for t in raw:
            acc[t.degree] = acc.get(t.degree, Rational(0, 1)) + t.coefficient
        merged = [Term(c, d) for d, c in acc.items() if not c.is_zero()]
        merged.sort(key=lambda t: t.degree, reverse=True)
        return tuple(merged)

    def is_zero(self) -> bool:
        return len(self.terms) == 0

    def degree(self) -> int:
        return self.terms[0].degree if self.terms else 0

    def coefficient(self, degree: int) -> Rational:
        for t in self.terms:
            if t.degree == degree:
                return t.coefficient
        return Rational(0, 1)

    def leading_coefficient(self) -> Rational:
        return self.terms[0].coefficient if self.terms else Rational(0, 1)

    def constant_coefficient(self) -> Rational:
        return self.coefficient(0)

    def evaluate(self, x: Union[Point, int]) -> Point:
        """Evaluate at ``x``.

        Rational and int points are evaluated exactly and give a Rational;
        a float point gives a float.
        """
        if isinstance(x, int) and not isinstance(x, bool):
            x = Rational(x, 1)
        total: Point = Rational(0, 1) if isinstance(x, Rational) else 0.0
        for t in self.terms:
            total = total + t.evaluate(x)
        return total

    def find_rational_roots(self) -> Set[Rational]:
        """Every rational root, found with the rational root theorem.

        Coefficients are cleared of denominators by the product of the
        denominators of all non-integral coefficients. Each candidate
        ``p/q``, with ``p`` dividing the cleared constant term and ``q``
        dividing the cleared leading coefficient, is kept only if exact
        substitution gives zero. When there is no degree 0 term, zero is a
        root and the lowest-degree coefficient stands in for the constant.
        """
        if not self.terms:
            return set()

        roots: Set[Rational] = set()
        lowest = self.terms[-1]
        if lowest.degree > 0:
            roots.add(Rational(0, 1))
        constant = lowest.coefficient
        leading = self.terms[0].coefficient

        divisor = 1
        for t in self.terms:
            if not t.coefficient.is_integral():
                divisor *= t.coefficient.denominator()
        LOG.debug("clearing divisor for %s: %d", self, divisor)

        scaled_constant = constant * divisor
        scaled_leading = leading * divisor
        if not (scaled_constant.is_integral() and scaled_leading.is_integral()):
            LOG.info("coefficients of %s could not be cleared; no roots searched", self)
            return set()

        lead_factors = scaled_leading.factors()
        candidates = {
            Rational(abs(p), abs(q), (p > 0) == (q > 0))
            for p in scaled_constant.factors()
            for q in lead_factors
        }
        LOG.debug("%d candidate roots for %s", len(candidates), self)

        for x in candidates:
            if self.evaluate(x).is_zero():
                roots.add(x)
        return roots

    def sorted_rational_roots(self) -> List[Rational]:
        return sorted(self.find_rational_roots())

    def to_string(self) -> str:
        if not self.terms:
            return "0"
        head, *rest = self.terms
        out = head.to_string()
        for t in rest:
            op = "+" if t.coefficient.is_positive() else "-"
            out += f" {op} {Term(abs(t.coefficient), t.degree)}"
        return out

    def __str__(self) -> str:
        return self.to_string()
