"""zpoly is a Python package for exact arithmetic with polynomials in one variable.

Coefficients live either in the ring of integers Z (characteristic 0) or in
a ring Z/nZ of integers modulo n (characteristic n). For prime n the ring is
the finite field GF(n), and all of the following is supported: addition,
subtraction, multiplication, long division with remainder, greatest common
divisors, Rabin's irreducibility test, and a randomized search for
irreducible polynomials of given degree.

Over Z, long division is refused rather than producing fractional
coefficients. For composite n, coefficients are kept reduced modulo n but
division, GCD and irreducibility testing are not supported.

Typical use:

    from zpoly.polynomial import Polynomial
    from zpoly.irreducible import find_irreducible_polynomial, is_reducible

    f = Polynomial.from_terms('x^2 + 1', 3)
    is_reducible(f)  # False
    find_irreducible_polynomial(2, 8)
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments recognized by zpoly."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('zpoly logging')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')
    group.add_argument('--verbose', action='store_true',
                       help='report progress of irreducibility tests and searches')

    parser.set_defaults(log_level='info')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    if options.verbose:
        os.environ['ZPOLY_VERBOSE'] = '1'  # NB: ZPOLY_VERBOSE also set for subprocesses
    logging.debug(f'Verbose progress reports {"on" if os.getenv("ZPOLY_VERBOSE") == "1" else "off"}')

    del options
