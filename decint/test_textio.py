"""
Unit tests for reading and writing BigInts on streams, and JSON encoding.
"""

import io
import json
import unittest

import decint
from decint import BigInt
from decint.json_encode import json_encode
from decint.textio import next_token
from decint.textio import read_bigint
from decint.textio import read_bigints
from decint.textio import write_bigint


class TextStreamTests(unittest.TestCase):

    def test_write(self):
        stream = io.StringIO()
        write_bigint(stream, BigInt('-98765432109876543210'))
        stream.write(' ')
        write_bigint(stream, 42)
        self.assertEqual('-98765432109876543210 42', stream.getvalue())

    def test_write_zero(self):
        stream = io.StringIO()
        write_bigint(stream, BigInt('-000'))
        self.assertEqual('0', stream.getvalue())

    def test_read(self):
        stream = io.StringIO('  12345678901234567890\n-7\t+00100 ')
        self.assertEqual('12345678901234567890', read_bigint(stream).to_string())
        self.assertEqual(BigInt(-7), read_bigint(stream))
        self.assertEqual(BigInt(100), read_bigint(stream))
        with self.assertRaises(EOFError):
            read_bigint(stream)

    def test_read_empty(self):
        with self.assertRaises(EOFError):
            read_bigint(io.StringIO(''))
        with self.assertRaises(EOFError):
            read_bigint(io.StringIO(' \n\t '))

    def test_read_bad(self):
        stream = io.StringIO('12 1x2 34')
        self.assertEqual(BigInt(12), read_bigint(stream))
        with self.assertRaises(BigInt.InvalidFormat):
            read_bigint(stream)
        self.assertEqual(BigInt(34), read_bigint(stream))

    def test_read_sign_alone(self):
        with self.assertRaises(BigInt.InvalidFormat):
            read_bigint(io.StringIO('- 5'))

    def test_read_all(self):
        stream = io.StringIO('1 -2\n3\n\n 40000000000000000000000 ')
        self.assertEqual(
            ['1', '-2', '3', '40000000000000000000000'],
            [n.to_string() for n in read_bigints(stream)],
        )
        self.assertEqual([], list(read_bigints(io.StringIO(''))))

    def test_write_then_read(self):
        stream = io.StringIO()
        for i in (0, -1, 10**30, -(3**50)):
            write_bigint(stream, i)
            stream.write('\n')
        stream.seek(0)
        self.assertEqual([0, -1, 10**30, -(3**50)], [int(n) for n in read_bigints(stream)])

    def test_next_token(self):
        stream = io.StringIO('ab  cd')
        self.assertEqual('ab', next_token(stream))
        self.assertEqual('cd', next_token(stream))
        self.assertIsNone(next_token(stream))

    def test_package_exports(self):
        self.assertIs(read_bigint, decint.read_bigint)
        self.assertIs(write_bigint, decint.write_bigint)
        self.assertIs(BigInt.InvalidFormat, decint.InvalidFormat)
        self.assertIs(BigInt.DivideByZero, decint.DivideByZero)
        self.assertIs(BigInt.DomainError, decint.DomainError)
        self.assertIs(BigInt.RangeOverflow, decint.RangeOverflow)
        self.assertIsInstance(decint.__version__, str)


class JsonEncodeTests(unittest.TestCase):

    def test_bigint(self):
        self.assertEqual('"-120"', json_encode(BigInt(-120)))

    def test_container(self):
        self.assertEqual('{"n":"-120"}', json_encode({'n': BigInt(-120)}))
        self.assertEqual(
            '["98765432109876543210",1,"0"]',
            json_encode([BigInt('98765432109876543210'), 1, BigInt('-0')]),
        )

    def test_lossless(self):
        big = BigInt(3**200)
        self.assertEqual(big, BigInt(json.loads(json_encode(big))))

    def test_spaces_on_request(self):
        self.assertEqual('{"n": "7"}', json_encode({'n': BigInt(7)}, separators=(',', ': ')))

    def test_unsupported(self):
        with self.assertRaises(TypeError):
            json_encode(object())

    def test_no_nan(self):
        with self.assertRaises(ValueError):
            json_encode(float('nan'))


if __name__ == '__main__':
    unittest.main(verbosity=2)
