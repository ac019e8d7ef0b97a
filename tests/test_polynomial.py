"""Tests for ImmutablePolynomial, Polynomial and the shared coefficient core."""

import pytest

from galoisfields.errors import (
    FieldMismatchError,
    InvalidElementError,
    PolynomialDivisionByZeroError,
)
from galoisfields.galois_field import GaloisField
from galoisfields.poly import core
from galoisfields.poly.polynomial import ImmutablePolynomial, Polynomial


@pytest.fixture(scope="module")
def gf7():
    return GaloisField(7)


@pytest.fixture(scope="module")
def gf256():
    return GaloisField(256)


# ======================================================================
# Coefficient core
# ======================================================================


class TestCore:
    def test_normalize(self):
        assert core.normalize([0, 0, 3, 0]) == [3, 0]
        assert core.normalize([0, 0]) == []
        assert core.normalize([]) == []

    def test_coefficient_at(self):
        assert core.coefficient_at([5, 3, 7], 2) == 5
        assert core.coefficient_at([5, 3, 7], 0) == 7
        assert core.coefficient_at([5, 3, 7], 3) == 0
        assert core.coefficient_at([5, 3, 7], -1) == 0

    def test_inputs_untouched(self, gf7):
        a, b = [1, 3, 2], [1, 1]
        core.add(gf7, a, b)
        core.mul(gf7, a, b)
        core.divmod_coefficients(gf7, a, b)
        assert a == [1, 3, 2]
        assert b == [1, 1]


# ======================================================================
# Construction and accessors
# ======================================================================


class TestConstruction:
    def test_leading_zeros_stripped(self, gf7):
        p = ImmutablePolynomial(gf7, [0, 0, 3, 2])
        assert p.coefficients == (3, 2)
        assert p.degree() == 1

    def test_zero(self, gf7):
        z = ImmutablePolynomial.zero(gf7)
        assert z.is_zero()
        assert z.degree() == -1
        assert z.leading_coefficient() == 0
        assert z.evaluate(5) == 0
        assert ImmutablePolynomial(gf7, [0, 0]).is_zero()

    def test_constructors(self, gf7):
        assert ImmutablePolynomial.one(gf7).coefficients == (1,)
        assert ImmutablePolynomial.constant(gf7, 5).coefficients == (5,)
        assert ImmutablePolynomial.monomial(gf7, 3, 2).coefficients == (2, 0, 0, 0)
        assert Polynomial.monomial(gf7, 0).coefficients == [1]
        assert isinstance(Polynomial.from_coefficients(gf7, [1, 2]), Polynomial)

    def test_monomial_negative_degree(self, gf7):
        with pytest.raises(ValueError, match="Degree must be >= 0"):
            ImmutablePolynomial.monomial(gf7, -1)

    @pytest.mark.parametrize("cls", [ImmutablePolynomial, Polynomial])
    @pytest.mark.parametrize("coeffs", [[300], [1, -1], [256, 0]])
    def test_rejects_coefficients_outside_field(self, gf256, cls, coeffs):
        with pytest.raises(InvalidElementError, match=r"not an element of GF\(256\)"):
            cls(gf256, coeffs)

    def test_prime_field_coefficients_not_reduced(self, gf7):
        with pytest.raises(InvalidElementError):
            ImmutablePolynomial(gf7, [7, 1])
        with pytest.raises(InvalidElementError):
            ImmutablePolynomial.constant(gf7, -1)

    def test_coefficient_at(self, gf7):
        p = ImmutablePolynomial(gf7, [5, 3, 1])
        assert [p.coefficient_at(d) for d in (2, 1, 0, 3, -1)] == [5, 3, 1, 0, 0]
        assert p.leading_coefficient() == 5

    def test_evaluate_horner(self, gf7):
        # x^2 + 1 over GF(7)
        p = ImmutablePolynomial(gf7, [1, 0, 1])
        assert [p.evaluate(x) for x in range(4)] == [1, 2, 5, 3]

    def test_evaluate_gf256(self, gf256):
        p = ImmutablePolynomial(gf256, [2, 3])
        for x in (0, 1, 2, 5, 200):
            assert p.evaluate(x) == gf256.add(gf256.multiply(2, x), 3)

    def test_equality(self, gf7):
        assert ImmutablePolynomial(gf7, [1, 2]) == ImmutablePolynomial(gf7, [0, 1, 2])
        assert ImmutablePolynomial(gf7, [1, 2]) == Polynomial(gf7, [1, 2])
        assert ImmutablePolynomial(gf7, [1, 2]) != ImmutablePolynomial(gf7, [1, 3])

    def test_immutable_is_hashable_and_read_only(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 2])
        assert hash(p) == hash(ImmutablePolynomial(gf7, [1, 2]))
        with pytest.raises(AttributeError):
            p._coefficients = (3,)

    def test_mutable_is_unhashable(self, gf7):
        with pytest.raises(TypeError):
            hash(Polynomial(gf7, [1]))


# ======================================================================
# Value semantics
# ======================================================================


class TestImmutableArithmetic:
    def test_add(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 3, 2])
        q = ImmutablePolynomial(gf7, [6, 5])
        assert p.add(q).coefficients == (1, 2, 0)

    def test_add_cancels_leading_terms(self, gf7):
        p = ImmutablePolynomial(gf7, [3, 1])
        q = ImmutablePolynomial(gf7, [4, 1])
        assert p.add(q).coefficients == (2,)

    def test_sub(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 3, 2])
        assert p.sub(p).is_zero()
        assert p.sub(ImmutablePolynomial(gf7, [1, 0, 0])).coefficients == (3, 2)

    def test_mul(self, gf7):
        # (x + 1)(x + 2) = x^2 + 3x + 2
        p = ImmutablePolynomial(gf7, [1, 1])
        q = ImmutablePolynomial(gf7, [1, 2])
        product = p.mul(q)
        assert product.coefficients == (1, 3, 2)
        assert product.degree() == p.degree() + q.degree()

    def test_mul_characteristic_two(self, gf256):
        p = ImmutablePolynomial(gf256, [1, 1])
        assert p.mul(p).coefficients == (1, 0, 1)

    def test_mul_by_zero(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 1])
        assert p.mul(ImmutablePolynomial.zero(gf7)).is_zero()

    def test_scalar_mul(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 3, 2])
        assert p.scalar_mul(3).coefficients == (3, 2, 6)
        assert p.scalar_mul(0).is_zero()

    def test_divmod_exact(self, gf7):
        q, r = ImmutablePolynomial(gf7, [1, 3, 2]).divmod(ImmutablePolynomial(gf7, [1, 1]))
        assert q.coefficients == (1, 2)
        assert r.is_zero()

    def test_divmod_with_remainder(self, gf7):
        # x^2 + 1 = (x + 1)(x + 6) + 2
        q, r = ImmutablePolynomial(gf7, [1, 0, 1]).divmod(ImmutablePolynomial(gf7, [1, 1]))
        assert q.coefficients == (1, 6)
        assert r.coefficients == (2,)

    def test_divmod_smaller_dividend(self, gf7):
        p = ImmutablePolynomial(gf7, [3, 2])
        q, r = p.divmod(ImmutablePolynomial(gf7, [1, 0, 1]))
        assert q.is_zero()
        assert r == p

    def test_divmod_by_zero(self, gf7):
        with pytest.raises(PolynomialDivisionByZeroError):
            ImmutablePolynomial(gf7, [1, 2]).divmod(ImmutablePolynomial.zero(gf7))

    def test_div_and_mod(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 0, 1])
        d = ImmutablePolynomial(gf7, [1, 1])
        assert p.div(d).coefficients == (1, 6)
        assert p.mod(d).coefficients == (2,)

    @pytest.mark.parametrize(
        "dividend,divisor",
        [
            ([1, 5, 3, 7], [1, 2]),
            ([200, 100, 50, 25, 1], [7, 0, 3]),
            ([9, 8, 7, 6, 5, 4, 3], [255, 1]),
            ([1, 2, 3], [4, 5, 6, 7]),
            ([17], [33]),
        ],
    )
    def test_division_identity(self, gf256, dividend, divisor):
        n = ImmutablePolynomial(gf256, dividend)
        d = ImmutablePolynomial(gf256, divisor)
        q, r = n.divmod(d)
        assert q.mul(d).add(r) == n
        assert r.degree() < d.degree()

    def test_operands_unchanged(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 3, 2])
        q = ImmutablePolynomial(gf7, [1, 1])
        p.add(q)
        p.sub(q)
        p.mul(q)
        p.scalar_mul(4)
        p.divmod(q)
        assert p.coefficients == (1, 3, 2)
        assert q.coefficients == (1, 1)

    def test_operators(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 3, 2])
        d = ImmutablePolynomial(gf7, [1, 1])
        assert p + d == p.add(d)
        assert p - d == p.sub(d)
        assert d * d == d.mul(d)
        assert p // d == p.div(d)
        assert p % d == p.mod(d)
        assert divmod(p, d) == p.divmod(d)

    def test_accepts_mutable_operand(self, gf7):
        p = ImmutablePolynomial(gf7, [1, 1])
        assert p.mul(Polynomial(gf7, [1, 2])).coefficients == (1, 3, 2)


# ======================================================================
# In-place semantics
# ======================================================================


class TestMutableArithmetic:
    def test_operations_return_self(self, gf7):
        p = Polynomial(gf7, [1, 1])
        q = ImmutablePolynomial(gf7, [1, 2])
        assert p.add(q) is p
        assert p.sub(q) is p
        assert p.mul(q) is p
        assert p.scalar_mul(2) is p
        assert p.div(q) is p
        assert p.mod(q) is p

    def test_fluent_chain(self, gf7):
        p = Polynomial(gf7, [1, 1])
        result = p.mul(Polynomial(gf7, [1, 2])).scalar_mul(3)
        assert result is p
        assert p.coefficients == [3, 2, 6]

    def test_divmod_turns_receiver_into_remainder(self, gf7):
        p = Polynomial(gf7, [1, 0, 1])
        q, r = p.divmod(Polynomial(gf7, [1, 1]))
        assert r is p
        assert q is not p
        assert isinstance(q, Polynomial)
        assert q.coefficients == [1, 6]
        assert p.coefficients == [2]

    def test_other_operand_unchanged(self, gf7):
        p = Polynomial(gf7, [1, 1])
        q = Polynomial(gf7, [1, 2])
        p.mul(q)
        assert q.coefficients == [1, 2]

    def test_self_operand(self, gf7):
        p = Polynomial(gf7, [1, 1])
        p.mul(p)
        assert p.coefficients == [1, 2, 1]
        p.sub(p)
        assert p.is_zero()

    def test_normalized_after_mutation(self, gf7):
        p = Polynomial(gf7, [3, 1])
        p.add(Polynomial(gf7, [4, 1]))
        assert p.coefficients == [2]
        assert p.degree() == 0

    def test_coefficients_returns_copy(self, gf7):
        p = Polynomial(gf7, [1, 2])
        p.coefficients.append(9)
        assert p.coefficients == [1, 2]

    def test_copy_is_independent(self, gf7):
        p = Polynomial(gf7, [1, 2])
        c = p.copy()
        c.scalar_mul(3)
        assert p.coefficients == [1, 2]
        assert c.coefficients == [3, 6]

    def test_set_coefficients(self, gf7):
        p = Polynomial(gf7, [1, 2])
        assert p.set_coefficients([0, 4, 5, 6]) is p
        assert p.coefficients == [4, 5, 6]

    def test_set_coefficient_at(self, gf7):
        p = Polynomial(gf7, [1, 2])
        p.set_coefficient_at(3, 4)
        assert p.coefficients == [4, 0, 1, 2]
        p.set_coefficient_at(0, 5)
        assert p.coefficients == [4, 0, 1, 5]
        p.set_coefficient_at(3, 0)
        assert p.coefficients == [1, 5]

    def test_set_coefficient_at_on_zero(self, gf7):
        p = Polynomial.zero(gf7)
        p.set_coefficient_at(2, 3)
        assert p.coefficients == [3, 0, 0]

    def test_set_coefficient_at_negative(self, gf7):
        with pytest.raises(ValueError):
            Polynomial(gf7, [1]).set_coefficient_at(-1, 2)

    def test_setters_reject_values_outside_field(self, gf7):
        p = Polynomial(gf7, [1, 2])
        with pytest.raises(InvalidElementError):
            p.set_coefficients([1, 9])
        with pytest.raises(InvalidElementError):
            p.set_coefficient_at(1, 7)
        assert p.coefficients == [1, 2]

    def test_in_place_operators(self, gf7):
        p = Polynomial(gf7, [1, 1])
        alias = p
        p *= Polynomial(gf7, [1, 2])
        p += Polynomial(gf7, [1])
        p -= Polynomial(gf7, [3, 0])
        assert p is alias
        assert p.coefficients == [1, 0, 3]


# ======================================================================
# Field identity
# ======================================================================


class TestFieldIdentity:
    @pytest.mark.parametrize("cls", [ImmutablePolynomial, Polynomial])
    def test_same_order_different_instance_rejected(self, cls):
        a = cls(GaloisField(7), [1, 2])
        b = cls(GaloisField(7), [1, 2])
        for op in (a.add, a.sub, a.mul, a.divmod, a.div, a.mod):
            with pytest.raises(FieldMismatchError, match="different fields"):
                op(b)

    def test_mismatch_leaves_mutable_receiver_untouched(self):
        a = Polynomial(GaloisField(7), [1, 2])
        with pytest.raises(FieldMismatchError):
            a.mul(Polynomial(GaloisField(11), [3]))
        assert a.coefficients == [1, 2]
