"""Sparse storage for the terms of a polynomial.

A term store maps exponents to coefficients. Invariant: every stored
coefficient is nonzero; setting a coefficient to zero removes the entry.
"""


class TermStore:
    """Mapping from nonnegative exponents to nonzero integer coefficients."""

    __slots__ = '_terms', '_degree'

    def __init__(self, terms=None):
        self._terms = {}
        self._degree = -1
        if terms:
            for e, c in dict(terms).items():
                self.set(e, c)

    def get(self, e):
        """Coefficient at exponent e (0 if absent)."""
        return self._terms.get(e, 0)

    def set(self, e, c):
        """Set coefficient at exponent e to c, removing the entry if c is 0."""
        if c:
            self._terms[e] = c
            if e > self._degree:
                self._degree = e
        else:
            self.discard(e)

    def discard(self, e):
        if self._terms.pop(e, None) is not None and e == self._degree:
            self._degree = max(self._terms, default=-1)

    def degree(self):
        """Highest exponent present (-1 if empty)."""
        return self._degree

    def leading(self):
        """Coefficient at highest exponent (0 if empty)."""
        return self._terms.get(self._degree, 0)

    def copy(self):
        t = TermStore()
        t._terms = self._terms.copy()
        t._degree = self._degree
        return t

    def __len__(self):
        return len(self._terms)

    def __iter__(self):
        """Yield (exponent, coefficient) pairs, highest exponent first."""
        for e in sorted(self._terms, reverse=True):
            yield e, self._terms[e]

    def __eq__(self, other):
        if not isinstance(other, TermStore):
            return NotImplemented

        return self._terms == other._terms

    __hash__ = None

    def __repr__(self):
        return f'TermStore({dict(self)})'
