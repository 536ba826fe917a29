"""This module supports arithmetic with polynomials over Z and Z/nZ.

A polynomial consists of a coefficient ring, fixed by its characteristic n,
and a sparse store of terms. For n > 0 every stored coefficient lies in
{0, ..., n-1}; for n = 0 coefficients are arbitrary integers. Zero
coefficients are never stored, so the zero polynomial has no terms and
degree -1.

Polynomials are mutable through add_term() and remove_term() only. All
other operations return new polynomials, leaving their operands unchanged.

The operators +,-,*,//,%,** and function divmod are overloaded, accepting
integers as constant polynomials. Long division is exact over GF(p) for
prime p. Over Z, division is refused by raising NonIntegralResult as soon as
a fractional coefficient would be needed. For composite n, division is not
supported at all.
"""

import collections
from zpoly import rings
from zpoly.rings import RingKind
from zpoly.terms import TermStore
from zpoly.formatting import X, to_terms, from_terms
from zpoly.errors import (NullOperand, InvalidExponent, IncompatibleRing, InvalidDivisor,
                          NonIntegralResult, UnsupportedRing)

DivisionResult = collections.namedtuple('DivisionResult', ['quotient', 'remainder'])


class Polynomial:
    """Polynomials in one variable with coefficients from ring Z/nZ, or Z for n=0.

    Invariant: all coefficients in attribute 'terms' are nonzero and reduced modulo n.
    """

    __slots__ = 'ring', 'terms'

    def __init__(self, characteristic=0, terms=None):
        """Initialize polynomial over ring of given characteristic (zero polynomial, by default).

        Optional terms are given as a mapping from exponents to coefficients,
        or as a string with sum of powers of x like '3x^2 + x + 2'.
        """
        self.ring = rings.ring(characteristic)
        self.terms = TermStore()
        if terms is not None:
            if isinstance(terms, str):
                terms = from_terms(terms)
            for e, c in dict(terms).items():
                self.add_term(c, e)

    @classmethod
    def from_terms(cls, s, characteristic=0, x=X):
        """Convert string s with sum of powers of x to a polynomial."""
        a = cls(characteristic)
        for e, c in from_terms(s, x).items():
            a.add_term(c, e)
        return a

    def to_terms(self, x=X):
        """Convert polynomial to a string with sum of powers of x."""
        return to_terms(self.terms, x)

    @property
    def characteristic(self):
        return self.ring.characteristic

    def _new(self, terms):
        a = object.__new__(type(self))
        a.ring = self.ring
        a.terms = terms
        return a

    def _check(self, other):
        if other is None:
            raise NullOperand('polynomial expected, got None')

        if not isinstance(other, Polynomial):
            raise TypeError(f'polynomial expected, got {type(other).__name__}')

        if other.ring.characteristic != self.ring.characteristic:
            raise IncompatibleRing(f'characteristic {other.characteristic} '
                                   f'differs from {self.characteristic}')

    def _coerce(self, other):
        # convert other to a term store over the same ring, if possible
        if isinstance(other, Polynomial):
            self._check(other)
            return other.terms

        if isinstance(other, int):
            return TermStore({0: self.ring.reduce(other)})

        return NotImplemented

    def add_term(self, coefficient, exponent):
        """Add coefficient times x^exponent to this polynomial, in-place."""
        if exponent < 0:
            raise InvalidExponent(f'negative exponent {exponent}')

        c = self.terms.get(exponent) + coefficient
        self.terms.set(exponent, self.ring.reduce(c))

    def remove_term(self, exponent):
        """Remove the term with given exponent, if present."""
        if exponent < 0:
            raise InvalidExponent(f'negative exponent {exponent}')

        self.terms.discard(exponent)

    def evaluate(self, x):
        """Evaluate polynomial at given x.

        Evaluation is done in the integers, without reducing modulo the characteristic.
        """
        y = 0
        d = None
        for e, c in self.terms:
            if d is not None:
                y *= x**(d - e)
            y += c
            d = e
        if d:
            y *= x**d
        return y

    __call__ = evaluate

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return self.terms.degree()

    def leading_coefficient(self):
        """Coefficient of the term of highest degree (0 for zero polynomial)."""
        return self.terms.leading()

    def coefficient(self, degree):
        """Coefficient of x^degree, possibly 0."""
        if degree < 0:
            raise InvalidExponent(f'negative degree {degree}')

        return self.terms.get(degree)

    def __getitem__(self, key):  # NB: no set_item, use add_term() instead
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        return self.coefficient(key)

    def number_of_nonzero_coefficients(self):
        return len(self.terms)

    __len__ = number_of_nonzero_coefficients

    def __iter__(self):
        """Yield (exponent, coefficient) pairs of all terms, highest degree first."""
        yield from self.terms

    def copy(self):
        """Copy of polynomial, not sharing any state with this polynomial."""
        return self._new(self.terms.copy())

    __copy__ = copy

    def _add(self, a, b, sign=1):
        reduce = self.ring.reduce
        c = a.copy()
        for i, b_i in b:
            c.set(i, reduce(c.get(i) + sign * b_i))
        return c

    def _sub(self, a, b):
        return self._add(a, b, sign=-1)

    def _mul(self, a, b):
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b)
        b = list(b)
        d = {}
        for i, a_i in a:
            for j, b_j in b:
                d[i + j] = d.get(i + j, 0) + a_i * b_j
        reduce = self.ring.reduce
        c = TermStore()
        for k, c_k in d.items():
            c.set(k, reduce(c_k))
        return c

    def _divmod(self, a, b):
        if not b:
            raise InvalidDivisor('division by zero polynomial')

        R = self.ring
        if R.kind is RingKind.COMPOSITE:
            raise UnsupportedRing(f'division not supported over {R}')

        n = b.degree()
        b1 = b.leading()
        if R.kind is RingKind.PRIME_FIELD:
            b1 = R.invert(b1)
        b = list(b)
        q, r = TermStore(), a.copy()
        while r.degree() >= n:
            m = r.degree()
            r1 = r.leading()
            if R.kind is RingKind.INTEGERS:
                q_i, s = divmod(r1, b1)
                if s:
                    raise NonIntegralResult(f'leading coefficient {b1} does not divide {r1}')
            else:
                q_i = R.reduce(r1 * b1)
            i = m - n
            q.set(i, q_i)
            for j, b_j in b:
                r.set(i + j, R.reduce(r.get(i + j) - q_i * b_j))
        return q, r

    def _mod(self, a, b):
        if b is None:  # see _powmod()
            return a

        return self._divmod(a, b)[1]

    def _powmod(self, a, n, modulus=None):
        if n < 0:
            raise ValueError('negative exponent')

        if n == 0:
            return self._mod(TermStore({0: self.ring.reduce(1)}), modulus)

        a = self._mod(a, modulus)
        b = a.copy()
        for i in range(n.bit_length()-2, -1, -1):
            b = self._mul(b, b)
            b = self._mod(b, modulus)
            if (n >> i) & 1:
                b = self._mul(b, a)
                b = self._mod(b, modulus)
        return b

    def add(self, other):
        """Sum of this polynomial and other."""
        self._check(other)
        return self._new(self._add(self.terms, other.terms))

    def subtract(self, other):
        """Difference of this polynomial and other."""
        self._check(other)
        return self._new(self._sub(self.terms, other.terms))

    def multiply(self, other):
        """Product of this polynomial and other."""
        self._check(other)
        return self._new(self._mul(self.terms, other.terms))

    def divide(self, divisor):
        """Divide this polynomial by nonzero divisor with remainder.

        Return DivisionResult (quotient, remainder) with deg remainder < deg divisor.
        """
        if divisor is None:
            raise InvalidDivisor('division by None')

        self._check(divisor)
        q, r = self._divmod(self.terms, divisor.terms)
        return DivisionResult(self._new(q), self._new(r))

    def powmod(self, n, modulus):
        """This polynomial to the power of n modulo nonzero polynomial modulus."""
        if modulus is None:
            raise InvalidDivisor('division by None')

        self._check(modulus)
        return self._new(self._powmod(self.terms, n, modulus.terms))

    def monic(self):
        """Monic version of polynomial over a prime field.

        Zero polynomial remains unchanged.
        """
        if not self.ring.is_field:
            raise UnsupportedRing(f'monic polynomials not supported over {self.ring}')

        a = self.terms
        a1 = a.leading()
        if a1 in (0, 1):
            return self.copy()

        a1 = self.ring.invert(a1)
        return self._new(TermStore({i: self.ring.reduce(a_i * a1) for i, a_i in a}))

    def __neg__(self):
        return self._new(self._sub(TermStore(), self.terms))

    def __pos__(self):
        return self.copy()

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._add(self.terms, other))

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._sub(self.terms, other))

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._sub(other, self.terms))

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._mul(self.terms, other))

    __rmul__ = __mul__

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._divmod(self.terms, other)[0])

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._divmod(other, self.terms)[0])

    def __mod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._divmod(self.terms, other)[1])

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._new(self._divmod(other, self.terms)[1])

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = self._divmod(self.terms, other)
        return DivisionResult(self._new(q), self._new(r))

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = self._divmod(other, self.terms)
        return DivisionResult(self._new(q), self._new(r))

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self._new(self._powmod(self.terms, other))

    def __eq__(self, other):
        """Equality test, requiring equal characteristics."""
        if isinstance(other, Polynomial):
            return self.characteristic == other.characteristic and self.terms == other.terms

        if isinstance(other, int):
            return self.terms == TermStore({0: self.ring.reduce(other)})

        return NotImplemented

    __hash__ = None  # NB: polynomials are mutable

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.terms)

    def __str__(self):
        return self.to_terms()

    def __repr__(self):
        return f'{type(self).__name__}({self.characteristic}, {self.to_terms()!r})'
