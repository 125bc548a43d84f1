"""
Number theory on BigInts:  integer square root and greatest common divisor.

Built only from the public BigInt operations.  No peeking at digits.
"""

import logging

from .bigint import BigInt


logger = logging.getLogger(__name__)


def isqrt(n):
    """
    Integer square root, rounded down.

        assert BigInt(3) == isqrt(15)
        assert BigInt(4) == isqrt(16)

    Newton's method, starting from a guess that cannot be too small:
    a d-digit n is less than 10**d, so its root is less than 10**ceil(d/2).
    From above, each step x = (x + n/x)/2 goes down until it reaches the root.
    The first step that fails to go down means the previous x was the answer.

    Raise DomainError for a negative n.
    """
    n = BigInt(n)
    if n.is_negative():
        raise BigInt.DomainError("Cannot take the square root of a negative number, {}".format(n))
    if n.is_zero():
        return BigInt(0)

    x = BigInt('1' + '0' * ((n.digit_count() + 1) // 2))
    steps = 0
    while True:
        next_x = (x + n / x) / 2
        if next_x >= x:
            break
        x = next_x
        steps += 1

    if x * x > n:
        # NOTE:  Truncation in the last step can leave x one too big.
        x.dec()
        logger.debug("isqrt of a %d-digit number corrected down by one", n.digit_count())
    logger.debug("isqrt of a %d-digit number took %d Newton steps", n.digit_count(), steps)
    return x


def gcd(a, b):
    """
    Greatest common divisor, never negative.

        assert BigInt(12) == gcd(60, 48)
        assert BigInt(0) == gcd(0, 0)

    Euclid:  (a, b) becomes (b, a % b) until b is zero.
    """
    a = abs(BigInt(a))
    b = abs(BigInt(b))
    steps = 0
    while not b.is_zero():
        a, b = b, a % b
        steps += 1
    logger.debug("gcd took %d Euclid steps", steps)
    return a
