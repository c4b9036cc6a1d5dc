"""Tests for single monomial terms."""

import pytest

from rational import Rational
from term import Term


class TestTerm:
    def test_evaluate_exact(self):
        t = Term(Rational(2, 3), 2)
        assert t.evaluate(Rational(3)) == Rational(6)

    def test_evaluate_negative_point(self):
        t = Term(Rational(1), 3)
        assert t.evaluate(Rational(1, 2, False)) == Rational(1, 8, False)

    def test_evaluate_float(self):
        t = Term(Rational(1, 2), 2)
        result = t.evaluate(3.0)
        assert isinstance(result, float)
        assert result == pytest.approx(4.5)

    def test_constant(self):
        t = Term(Rational(5), 0)
        assert t.is_constant()
        assert t.evaluate(Rational(100)) == Rational(5)

    def test_negative_degree_is_zero_power(self):
        t = Term(Rational(3), -2)
        assert t.evaluate(Rational(5)) == Rational(3)
        assert t.evaluate(5.0) == pytest.approx(3.0)

    def test_is_zero(self):
        assert Term(Rational(0), 4).is_zero()
        assert Term().is_zero()

    def test_equality(self):
        assert Term(Rational(4, 2), 1) == Term(Rational(2), 1)
        assert Term(Rational(2), 1) != Term(Rational(2), 2)

    def test_neg(self):
        assert -Term(Rational(2), 1) == Term(Rational(-2), 1)

    @pytest.mark.parametrize("term,text", [
        (Term(Rational(3), 2), "3x^2"),
        (Term(Rational(1), 1), "x"),
        (Term(Rational(-1), 1), "-x"),
        (Term(Rational(-7, 2), 3), "-7/2x^3"),
        (Term(Rational(1, 2), 0), "1/2"),
    ])
    def test_to_string(self, term, text):
        assert str(term) == text
