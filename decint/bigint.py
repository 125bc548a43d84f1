"""
A BigInt is a signed integer of any size, stored as decimal digits.

Features:
 - arbitrary precision
 - exact, truncating division and modulo
 - conversion to and from int and decimal strings
"""

import numbers

from . import digits as magnitude


class BigInt(numbers.Number):
    """
    Signed, arbitrary-precision integer.

    Internally a sign and a magnitude.  The magnitude is a list of decimal digits,
    least significant first.

        BigInt(-120)  has  _negative=True   _digits=[0, 2, 1]
        BigInt(0)     has  _negative=False  _digits=[0]

    Invariants, after every public operation:
        No most-significant zero digits, except zero itself which is exactly [0].
        Zero is never negative.
        The digit list is never empty.

    Arithmetic:

        assert BigInt('1000') / BigInt('123') == 8
        assert BigInt('1000') % BigInt('123') == 16
        assert BigInt(-10) % 3 == -1   # remainder takes the sign of the dividend
        assert BigInt(10) % -3 == 1

    Named methods carry the contracts.  The operators are shorthand for them:

        x.add(y)          x + y    x += y
        x.subtract(y)     x - y    x -= y
        x.multiply(y)     x * y    x *= y
        x.divide(y)       x / y    x //= y   (both slashes truncate toward zero)
        x.modulo(y)       x % y    x %= y
        x.compare(y)      == != < <= > >=
    """

    __slots__ = ('_negative', '_digits')

    NATIVE_BITS_DEFAULT = 64   # to_native_int() range, like a C long long

    def __init__(self, content=None):
        """
        BigInt constructor.

        content - the type can be:
            int              10**100
            decimal string   '-12345678901234567890'
            another BigInt   BigInt(42)
            None             zero
        """
        if isinstance(content, int):
            self._from_int(content)
        elif isinstance(content, str):
            self._from_string(content)
        elif isinstance(content, BigInt):
            self._from_another_bigint(content)
        elif content is None:
            self._negative = False
            self._digits = [0]
        else:
            raise self.ConstructorTypeError("{outer}({inner}) is not supported".format(
                outer=type_name(self),
                inner=type_name(content),
            ))

    # Errors
    # ------
    class Error(Exception):
        """Anything that goes wrong inside a BigInt operation."""

    class InvalidFormat(Error, ValueError):
        """e.g. BigInt(''), BigInt('-'), BigInt('12a')"""

    class DivideByZero(Error, ZeroDivisionError):
        """e.g. BigInt(1) / 0, BigInt(1) % 0"""

    class DomainError(Error, ValueError):
        """e.g. isqrt(BigInt(-1))"""

    class RangeOverflow(Error, OverflowError):
        """e.g. BigInt(2**63).to_native_int()"""

    class ConstructorTypeError(Error, TypeError):
        """e.g. BigInt(1.5), BigInt([])"""

    # "from" conversions:  BigInt <-- other type
    # ------------------------------------------
    def _from_int(self, i):
        """Fill in from an int.  Python ints never overflow, so any size will do."""
        self._negative = i < 0
        self._digits = magnitude.digits_from_int(abs(i))

    def _from_string(self, s):
        """
        Fill in from a decimal string.

        assert BigInt(123) == BigInt('123') == BigInt('+00123')
        assert BigInt(0) == BigInt('-0')
        """
        self._negative, self._digits = self._parse(s)
        self._normalize()

    @classmethod
    def _parse(cls, s):
        """
        Check and digest a decimal string:  (negative, digits)

        Grammar:  an optional + or - then one or more of 0-9.  Nothing else, not even whitespace.
        """
        if s[0:1] in ('+', '-'):
            negative = s[0] == '-'
            decimal = s[1:]
        else:
            negative = False
            decimal = s
        if len(decimal) == 0:
            raise cls.InvalidFormat("A BigInt string needs at least one digit, not {}".format(repr(s)))
        for c in decimal:
            if c not in magnitude.DECIMAL_CHARACTERS:
                raise cls.InvalidFormat("A BigInt string has only 0-9 after the sign, not {}".format(repr(s)))
        return negative, magnitude.digits_from_decimal(decimal)

    def _from_another_bigint(self, another_bigint):
        """
        Copy Constructor

            assert BigInt(1) == BigInt(BigInt(1))

        The digit list is duplicated.  A copy never shares digits with its original.
        """
        self._negative = another_bigint._negative
        self._digits = list(another_bigint._digits)

    @classmethod
    def _from_parts(cls, negative, digits):
        """A new BigInt from a sign and a magnitude, normalized."""
        return_value = cls.__new__(cls)
        return_value._negative = negative
        return_value._digits = digits
        return_value._normalize()
        return return_value

    @classmethod
    def move(cls, source):
        """
        Take over the sign and digits of the source, leaving the source zero.

            a = BigInt(42)
            b = BigInt.move(a)
            assert b == 42
            assert a == 0
        """
        return_value = cls._from_parts(source._negative, source._digits)
        source._negative = False
        source._digits = [0]
        return return_value

    def assign(self, content):
        """
        Replace the value, in place.  Same content types as the constructor.

        Nothing changes if the content is bad, e.g. x.assign('12a') raises InvalidFormat
        and x keeps its old value.
        """
        self._take(type(self)(content))
        return self

    def _take(self, other):
        """Assume the value of another BigInt.  The last step of every in-place operation."""
        self._negative = other._negative
        self._digits = other._digits

    def _normalize(self):
        """Trim most-significant zeros, and make zero positive."""
        magnitude.trim(self._digits)
        if magnitude.is_zero(self._digits):
            self._negative = False

    @classmethod
    def _operand(cls, x):
        """The other operand of a named method, as a BigInt."""
        if isinstance(x, BigInt):
            return x
        return cls(x)

    @classmethod
    def _op_ready(cls, x):
        """Get x ready for an operator.  NotImplemented means Python should try something else."""
        if isinstance(x, BigInt):
            return x
        elif isinstance(x, int):
            return cls(x)
        else:
            return NotImplemented

    # "to" conversions:  BigInt --> other type
    # ----------------------------------------
    def to_string(self):
        """
        Decimal digits, most significant first, after a minus sign if negative.

        assert '-120' == BigInt(-120).to_string()
        assert '0' == BigInt('-000').to_string()
        """
        if self._negative:
            return '-' + magnitude.decimal_from_digits(self._digits)
        return magnitude.decimal_from_digits(self._digits)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "BigInt('{}')".format(self.to_string())

    def to_native_int(self, bits=None):
        """
        Convert to an int that would fit in a signed integer of this many bits.

        Raise RangeOverflow if it would not fit.  Default is 64 bits, a C long long.
        Use int(x) instead for a Python int of any size.
        """
        if bits is None:
            bits = self.NATIVE_BITS_DEFAULT
        (lowest, highest) = self._native_bounds(bits)
        if self < lowest or self > highest:
            raise self.RangeOverflow("{value} does not fit in a {bits}-bit integer".format(
                value=self.to_string(),
                bits=bits,
            ))
        return self._to_int()

    _native_bounds_cache = {}

    @classmethod
    def native_bounds(cls, bits):
        """
        Smallest and biggest values of a two's complement integer with this many bits.

        assert (BigInt(-128), BigInt(127)) == BigInt.native_bounds(8)

        The pair is a fresh copy each call, so the caller may change it.
        """
        (lowest, highest) = cls._native_bounds(bits)
        return BigInt(lowest), BigInt(highest)

    @classmethod
    def _native_bounds(cls, bits):
        """The cached bounds themselves.  Never hand these out."""
        assert isinstance(bits, int) and bits > 0
        try:
            return cls._native_bounds_cache[bits]
        except KeyError:
            bounds = (BigInt(-(1 << (bits - 1))), BigInt((1 << (bits - 1)) - 1))
            cls._native_bounds_cache[bits] = bounds
            return bounds

    def _to_int(self):
        the_int = magnitude.int_from_digits(self._digits)
        return -the_int if self._negative else the_int

    def __int__(self):
        """Convert to a Python int, no matter how big."""
        return self._to_int()

    __index__ = __int__

    def __bool__(self):
        return not self.is_zero()

    def digit_count(self):
        """How many decimal digits.  Zero has one."""
        return len(self._digits)

    @property
    def digits(self):
        """The magnitude, least significant digit first, as a tuple."""
        return tuple(self._digits)

    def to_json(self):
        """
        JSON rendering is a decimal string.

        A string because a JSON consumer may only have double-precision numbers.
        See json_encode().
        """
        return self.to_string()

    def __getstate__(self):
        """For the 'pickle' package, object serialization."""
        return self.to_string()

    def __setstate__(self, decimal_string):
        """For the 'pickle' package, object serialization."""
        self._from_string(decimal_string)

    def __copy__(self):
        return type(self)(self)

    def __deepcopy__(self, memo):
        return type(self)(self)

    # Inspection
    # ----------
    def is_negative(self):
        return self._negative

    def is_positive(self):
        return not self._negative and not self.is_zero()

    def is_zero(self):
        return magnitude.is_zero(self._digits)

    # Comparison
    # ----------
    def compare(self, other):
        """
        Three-way comparison:  -1 if self < other, 0 if equal, +1 if self > other

        assert -1 == BigInt(-5).compare(3)
        """
        other = self._operand(other)
        if self._negative != other._negative:
            return -1 if self._negative else 1
        if self.is_zero() and other.is_zero():
            return 0
        ordering = magnitude.compare_magnitudes(self._digits, other._digits)
        return -ordering if self._negative else ordering

    def _comparison(self, other, verdict):
        """Handle the comparison operators.  verdict() interprets the result of compare()."""
        other = self._op_ready(other)
        if other is NotImplemented:
            return NotImplemented
        return verdict(self.compare(other))

    def __eq__(self, other): return self._comparison(other, lambda c: c == 0)
    def __ne__(self, other): return self._comparison(other, lambda c: c != 0)
    def __lt__(self, other): return self._comparison(other, lambda c: c <  0)
    def __le__(self, other): return self._comparison(other, lambda c: c <= 0)
    def __gt__(self, other): return self._comparison(other, lambda c: c >  0)
    def __ge__(self, other): return self._comparison(other, lambda c: c >= 0)

    def __hash__(self):
        """Same hash as the equal int, so BigInt(42) and 42 are the same dictionary key."""
        return hash(self._to_int())

    # Math
    # ----
    def negate(self):
        """Opposite sign, same magnitude.  Zero stays zero."""
        return self._from_parts(not self._negative, list(self._digits))

    def __neg__(self): return self.negate()
    def __pos__(self): return type(self)(self)
    def __abs__(self): return self._from_parts(False, list(self._digits))

    def add(self, other):
        """
        Sum.

        Same signs add magnitudes.  Different signs subtract the smaller magnitude
        from the bigger, and the bigger one's sign wins.
        """
        other = self._operand(other)
        return self._signed_sum(self._negative, self._digits, other._negative, other._digits)

    def subtract(self, other):
        """
        Difference, by adding the negation.

        With the same signs, if |self| < |other| the result is |other| - |self|
        with the sign flipped.
        """
        other = self._operand(other)
        return self._signed_sum(self._negative, self._digits, not other._negative, other._digits)

    @classmethod
    def _signed_sum(cls, left_negative, left_digits, right_negative, right_digits):
        """Add two sign-and-magnitude pairs."""
        if left_negative == right_negative:
            return cls._from_parts(left_negative, magnitude.add_magnitudes(left_digits, right_digits))
        elif magnitude.compare_magnitudes(left_digits, right_digits) < 0:
            return cls._from_parts(right_negative, magnitude.subtract_magnitudes(right_digits, left_digits))
        else:
            return cls._from_parts(left_negative, magnitude.subtract_magnitudes(left_digits, right_digits))
            # NOTE:  Equal magnitudes come out [0], which _normalize() makes positive.

    def multiply(self, other):
        """Product.  Same signs positive, different signs negative, zero if either is zero."""
        other = self._operand(other)
        return self._from_parts(
            self._negative != other._negative,
            magnitude.multiply_magnitudes(self._digits, other._digits),
        )

    def divide_and_remainder(self, divisor):
        """
        Quotient and remainder, from one long division:  (quotient, remainder)

        Truncating division.  The quotient rounds toward zero.
        The remainder has the sign of the dividend (or is zero).

            assert (BigInt(-3), BigInt(-1)) == BigInt(-10).divide_and_remainder(3)
            assert (BigInt(-3), BigInt(1)) == BigInt(10).divide_and_remainder(-3)

        Raise DivideByZero if the divisor is zero.
        """
        divisor = self._operand(divisor)
        if divisor.is_zero():
            raise self.DivideByZero("Cannot divide {} by zero".format(self.to_string()))
        (quotient_digits, remainder_digits) = magnitude.divmod_magnitudes(self._digits, divisor._digits)
        quotient = self._from_parts(self._negative != divisor._negative, quotient_digits)
        remainder = self._from_parts(self._negative, remainder_digits)
        return quotient, remainder

    def divide(self, divisor):
        """Truncated quotient."""
        return self.divide_and_remainder(divisor)[0]

    def modulo(self, divisor):
        """Remainder, signed like the dividend."""
        return self.divide_and_remainder(divisor)[1]

    @classmethod
    def _binary_op(cls, method, input_left, input_right):
        """Two-input operator, either operand may be an int."""
        left = cls._op_ready(input_left)
        right = cls._op_ready(input_right)
        if left is NotImplemented or right is NotImplemented:
            return NotImplemented
        return method(left, right)

    def _inplace_op(self, method, other):
        """
        Two-input operator that changes self, e.g. x += 1

        The result is computed in full before self changes,
        so a failure, e.g. x %= 0, leaves self alone.
        """
        other = self._op_ready(other)
        if other is NotImplemented:
            return NotImplemented
        self._take(method(self, other))
        return self

    def __add__(self, other): return self._binary_op(BigInt.add, self, other)
    def __radd__(self, other): return self._binary_op(BigInt.add, other, self)
    def __sub__(self, other): return self._binary_op(BigInt.subtract, self, other)
    def __rsub__(self, other): return self._binary_op(BigInt.subtract, other, self)
    def __mul__(self, other): return self._binary_op(BigInt.multiply, self, other)
    def __rmul__(self, other): return self._binary_op(BigInt.multiply, other, self)
    def __truediv__( self, other): return self._binary_op(BigInt.divide, self, other)
    def __rtruediv__(self, other): return self._binary_op(BigInt.divide, other, self)
    def __floordiv__( self, other): return self._binary_op(BigInt.divide, self, other)
    def __rfloordiv__(self, other): return self._binary_op(BigInt.divide, other, self)
    def __mod__(self, other): return self._binary_op(BigInt.modulo, self, other)
    def __rmod__(self, other): return self._binary_op(BigInt.modulo, other, self)
    def __divmod__(self, other): return self._binary_op(BigInt.divide_and_remainder, self, other)
    def __rdivmod__(self, other): return self._binary_op(BigInt.divide_and_remainder, other, self)
    # NOTE:  // truncates toward zero here, unlike int // which floors.  BigInt(-7) // 2 == -3

    def __iadd__(self, other): return self._inplace_op(BigInt.add, other)
    def __isub__(self, other): return self._inplace_op(BigInt.subtract, other)
    def __imul__(self, other): return self._inplace_op(BigInt.multiply, other)
    def __itruediv__(self, other): return self._inplace_op(BigInt.divide, other)
    def __ifloordiv__(self, other): return self._inplace_op(BigInt.divide, other)
    def __imod__(self, other): return self._inplace_op(BigInt.modulo, other)

    def inc(self):
        """Add one, in place.  Like prefix ++x, returns the new value (self)."""
        self._take(self.add(1))
        return self

    def dec(self):
        """Subtract one, in place.  Like prefix --x."""
        self._take(self.subtract(1))
        return self

    def post_inc(self):
        """Add one, in place.  Like postfix x++, returns (a copy of) the old value."""
        old = type(self)(self)
        self.inc()
        return old

    def post_dec(self):
        """Subtract one, in place.  Like postfix x--."""
        old = type(self)(self)
        self.dec()
        return old


def compare(a, b):
    """Three-way comparison of two BigInts (or ints):  -1, 0, or +1"""
    return BigInt._operand(a).compare(b)


# Inspection
# ----------
def type_name(x):
    """
    Describe (very briefly) what type of object this is.

    THANKS:  http://stackoverflow.com/a/5008854/673991
    """
    return type(x).__name__
assert 'int' == type_name(3)
assert 'BigInt' == type_name(BigInt())
