"""
Read and write BigInts on text streams, e.g. sys.stdin, sys.stdout, io.StringIO, open('x.txt')

Same grammar as BigInt(str), with whitespace separating one integer from the next.
"""

from .bigint import BigInt


def write_bigint(stream, x):
    """Write the decimal rendering of a BigInt (or int) to a text stream.  No separator."""
    stream.write(BigInt(x).to_string())


def read_bigint(stream):
    """
    Read the next whitespace-delimited integer from a text stream.

    Raise EOFError if the stream runs out before any integer starts.
    Raise BigInt.InvalidFormat if the next token is not an integer.
    """
    token = next_token(stream)
    if token is None:
        raise EOFError("No more integers on the stream")
    return BigInt(token)


def read_bigints(stream):
    """Generate every integer on a text stream, until it runs out."""
    while True:
        token = next_token(stream)
        if token is None:
            return
        yield BigInt(token)


def next_token(stream):
    """
    Skip whitespace, then collect characters up to the next whitespace or the end.

    The whitespace character that ends a token is consumed.
    Return None if only whitespace (or nothing) was left.
    """
    c = stream.read(1)
    while c != '' and c.isspace():
        c = stream.read(1)
    if c == '':
        return None
    characters = []
    while c != '' and not c.isspace():
        characters.append(c)
        c = stream.read(1)
    return ''.join(characters)
