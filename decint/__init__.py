"""
decint - Big integers, stored as decimal digits.

Usage example:

    import decint

    n = decint.BigInt('98765432109876543210')
    assert '9938079900' == str(decint.isqrt(n))
    assert 12 == decint.gcd(60, 48)
    assert 8 == decint.BigInt(1000) / 123
    assert 16 == decint.BigInt(1000) % 123

Usage example:

    from decint import BigInt

    counter = BigInt(10)
    counter.inc()
    counter -= 5
    assert 6 == counter.to_native_int()
"""

from .bigint import BigInt
from .bigint import compare
from .numeric import gcd
from .numeric import isqrt
from .textio import read_bigint
from .textio import read_bigints
from .textio import write_bigint
from .json_encode import json_encode

InvalidFormat = BigInt.InvalidFormat
DivideByZero = BigInt.DivideByZero
DomainError = BigInt.DomainError
RangeOverflow = BigInt.RangeOverflow

__all__ = [
    'BigInt',
    'compare',
    'gcd',
    'isqrt',
    'read_bigint',
    'read_bigints',
    'write_bigint',
    'json_encode',
    'InvalidFormat',
    'DivideByZero',
    'DomainError',
    'RangeOverflow',
]

from . import version
__version__ = version.__doc__
