"""
Magnitude arithmetic on lists of decimal digits.

A magnitude is a list of ints, each 0 through 9, least significant digit first:

    [3, 2, 1] is 123
    [0]       is zero

A normalized magnitude has no most-significant zeros, except zero itself which is exactly [0].
Every function here takes normalized magnitudes and returns a new normalized magnitude.
Inputs are never modified.  Signs are none of this module's business, see BigInt.
"""

BASE = 10
DECIMAL_CHARACTERS = '0123456789'


def trim(digits):
    """Strip most-significant zeros, in place.  Always leave at least one digit."""
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return digits


def is_zero(digits):
    return len(digits) == 1 and digits[0] == 0


# Conversions
# -----------
def digits_from_int(i):
    """
    Decimal digits of a non-negative int.

    Repeated divmod() rather than str(i), so there's no dependence on the
    interpreter's limit on int-to-str conversion length.
    """
    assert i >= 0
    if i == 0:
        return [0]
    digits = []
    while i > 0:
        i, digit = divmod(i, BASE)
        digits.append(digit)
    return digits
assert [3, 2, 1] == digits_from_int(123)
assert [0] == digits_from_int(0)


def int_from_digits(digits):
    """Accumulate from the most significant digit down:  result*10 + digit."""
    result = 0
    for digit in reversed(digits):
        result = result * BASE + digit
    return result
assert 1203 == int_from_digits([3, 0, 2, 1])


def digits_from_decimal(decimal_string):
    """
    Digits of an unsigned string of decimal characters, e.g. '00120' --> [0, 2, 1]

    The caller checks the characters.  Leading zeros are trimmed.
    """
    assert len(decimal_string) > 0
    return trim([DECIMAL_CHARACTERS.index(c) for c in reversed(decimal_string)])


def decimal_from_digits(digits):
    return ''.join(DECIMAL_CHARACTERS[digit] for digit in reversed(digits))
assert '120' == decimal_from_digits([0, 2, 1])


# Comparison
# ----------
def compare_magnitudes(a, b):
    """
    Three-way comparison:  -1 if a < b, 0 if a == b, +1 if a > b

    More digits means bigger.  Equal lengths go digit by digit from the most significant.
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for a_digit, b_digit in zip(reversed(a), reversed(b)):
        if a_digit != b_digit:
            return -1 if a_digit < b_digit else 1
    return 0


# Addition and subtraction
# ------------------------
def add_magnitudes(a, b):
    """a + b, carrying until both operands and the carry are used up."""
    if len(a) < len(b):
        a, b = b, a
    total = []
    carry = 0
    for i in range(len(a)):
        carry += a[i]
        if i < len(b):
            carry += b[i]
        total.append(carry % BASE)
        carry //= BASE
    if carry:
        total.append(carry)
    return total


def subtract_magnitudes(a, b):
    """
    a - b, borrowing as needed.

    The minuend must be at least as big as the subtrahend.  BigInt sorts that out first.
    """
    assert compare_magnitudes(a, b) >= 0
    difference = []
    borrow = 0
    for i in range(len(a)):
        digit = a[i] - borrow
        if i < len(b):
            digit -= b[i]
        if digit < 0:
            digit += BASE
            borrow = 1
        else:
            borrow = 0
        difference.append(digit)
    assert borrow == 0
    return trim(difference)


# Multiplication
# --------------
def multiply_magnitudes(a, b):
    """
    Schoolbook multiplication, a * b

    Every digit product a[i]*b[j] piles up in column i+j with no carrying,
    then a single pass from the least significant column carries it all.
    len(a) + len(b) columns always suffice.
    """
    if is_zero(a) or is_zero(b):
        return [0]
    columns = [0] * (len(a) + len(b))
    for i, a_digit in enumerate(a):
        if a_digit == 0:
            continue
        for j, b_digit in enumerate(b):
            columns[i + j] += a_digit * b_digit
    carry = 0
    for k in range(len(columns)):
        carry += columns[k]
        columns[k] = carry % BASE
        carry //= BASE
    assert carry == 0
    return trim(columns)


# Division
# --------
def divmod_magnitudes(dividend, divisor):
    """
    Long division, one sweep for both answers:  (quotient, remainder)

    Bring down the next dividend digit into the partial remainder,
    find the biggest multiple of the divisor that fits, subtract it,
    and that multiplier is the next quotient digit.
    Quotient digits come out most significant first, so they get reversed at the end.

    The divisor must not be zero.  BigInt checks that before getting here.
    """
    assert not is_zero(divisor)
    if compare_magnitudes(dividend, divisor) < 0:
        return [0], list(dividend)

    multiples = [[0]]
    for _ in range(BASE - 1):
        multiples.append(add_magnitudes(multiples[-1], divisor))
    # NOTE:  multiples[d] is d times the divisor, d = 0 through 9

    quotient_backwards = []
    remainder = [0]
    for digit in reversed(dividend):
        remainder = shift_in(remainder, digit)
        d = quotient_digit(multiples, remainder)
        if d > 0:
            remainder = subtract_magnitudes(remainder, multiples[d])
        quotient_backwards.append(d)
    quotient = trim(quotient_backwards[::-1])
    return quotient, remainder


def shift_in(digits, digit):
    """digits*10 + digit"""
    if is_zero(digits):
        return [digit]
    return [digit] + digits
assert [5, 2, 1] == shift_in([2, 1], 5)
assert [7] == shift_in([0], 7)


def quotient_digit(multiples, remainder):
    """
    Binary search for the biggest d such that multiples[d] <= remainder.

    multiples[0] is zero, which always fits.
    """
    low = 0
    high = len(multiples) - 1
    while low < high:
        middle = (low + high + 1) // 2
        if compare_magnitudes(multiples[middle], remainder) <= 0:
            low = middle
        else:
            high = middle - 1
    return low
