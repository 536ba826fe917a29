"""Conversion between polynomials and strings with sums of powers of x.

For example, the polynomial with terms {7: 1, 5: -2, 2: 2, 1: 11, 0: -2}
is written as 'x^7 - 2x^5 + 2x^2 + 11x - 2'. The zero polynomial
(without any terms) is written as the empty string.
"""

import re

X = 'x'  # symbol for indeterminate in polynomials

_TERMS = re.compile(r'(?:[+-][^+-]+)+')
_TERM = re.compile(r'([+-])([^+-]+)')


def to_terms(terms, x=X):
    """Convert (exponent, coefficient) pairs to a string with sum of powers of x.

    Pairs must be given in descending order of exponents and coefficients must
    be nonzero, as produced by iterating over a polynomial.
    """
    s = ''
    for i, c in terms:
        if s:
            s += ' - ' if c < 0 else ' + '
        elif c < 0:
            s += '-'
        c = abs(c)
        a = '' if c == 1 else c
        if i == 0:
            s += f'{c}'  # x^0 = 1
        elif i == 1:
            s += f'{a}{x}'  # x^1 = x
        else:
            s += f'{a}{x}^{i}'
    return s


def from_terms(s, x=X):
    """Convert string s with sum of powers of x to a dict mapping exponents to coefficients.

    Coefficients are plain integers, not reduced; terms with equal exponents are combined.
    """
    d = {}
    s = ''.join(s.split())  # remove all whitespace
    if s in ('', '0'):
        return d

    if s[0] not in '+-':
        s = '+' + s
    if not _TERMS.fullmatch(s):
        raise ValueError('ill formatted polynomial')

    for sign, term in _TERM.findall(s):
        try:
            if term.find(x) == -1:
                c = int(term)
                i = 0
            elif term.endswith(x):
                c = term[:-len(x)]
                c = 1 if c == '' else int(c)
                i = 1
            else:
                c, i = term.split(f'{x}^')
                c = 1 if c == '' else int(c)
                i = int(i)
        except ValueError as exc:
            raise ValueError('ill formatted polynomial') from exc

        if sign == '-':
            c = -c
        d[i] = d.get(i, 0) + c
    return d
