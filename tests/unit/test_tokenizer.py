import unittest

from bencodec.config import MAX_INTEGER_DIGITS, DecodeOptions
from bencodec.errors import MalformedIntegerError, MalformedStringError, UnexpectedByteError
from bencodec.tokenizer import tokenize
from bencodec.tokens import Token, TokenType


class TestTokenize(unittest.TestCase):
    def test_list_of_atoms(self):
        self.assertEqual(
            tokenize(b'li1e4:spame'),
            [
                Token(TokenType.LIST_OPEN, None, 0),
                Token(TokenType.INTEGER, 1, 1),
                Token(TokenType.STRING, b'spam', 4),
                Token(TokenType.END, None, 10),
            ]
        )

    def test_dict_markers(self):
        types = [token.type for token in tokenize(b'd3:cowi1ee')]
        self.assertEqual(types, [TokenType.DICT_OPEN, TokenType.STRING, TokenType.INTEGER, TokenType.END])

    def test_empty_buffer(self):
        self.assertEqual(tokenize(b''), [])

    def test_string_payload_is_raw(self):
        raw = bytes([0x00, 0xff, 0x3a, 0x65])
        self.assertEqual(tokenize(b'4:' + raw)[0].value, raw)

    def test_zero_length_string(self):
        self.assertEqual(tokenize(b'0:'), [Token(TokenType.STRING, b'', 0)])

    def test_multi_digit_length(self):
        token = tokenize(b'12:hello world!i1e')[0]
        self.assertEqual(token.value, b'hello world!')

    def test_negative_integer(self):
        self.assertEqual(tokenize(b'i-42e')[0].value, -42)

    def test_large_integer(self):
        self.assertEqual(tokenize(b'i123456789012345678901234567890e')[0].value,
                         123456789012345678901234567890)

    def test_does_not_track_nesting(self):
        self.assertEqual([t.type for t in tokenize(b'eee')], [TokenType.END] * 3)
        self.assertEqual([t.type for t in tokenize(b'l')], [TokenType.LIST_OPEN])

    def test_accepts_bytearray(self):
        self.assertEqual(tokenize(bytearray(b'i7e'))[0].value, 7)

    def test_rejects_text(self):
        with self.assertRaises(TypeError):
            tokenize('i7e')

    def test_truncated_string(self):
        with self.assertRaises(MalformedStringError) as cm:
            tokenize(b'i1e5:ab')
        self.assertEqual(cm.exception.position, 3)

    def test_string_without_colon(self):
        with self.assertRaises(MalformedStringError):
            tokenize(b'4spam')

    def test_string_length_with_garbage(self):
        with self.assertRaises(MalformedStringError):
            tokenize(b'4x:spam')

    def test_unterminated_integer(self):
        with self.assertRaises(MalformedIntegerError) as cm:
            tokenize(b'i42')
        self.assertEqual(cm.exception.position, 0)

    def test_invalid_integer_bodies(self):
        for data in (b'ie', b'i-e', b'i4x2e', b'i1.5e', b'i--1e', b'i 1e'):
            with self.subTest(data=data):
                with self.assertRaises(MalformedIntegerError):
                    tokenize(data)

    def test_integer_too_long(self):
        with self.assertRaises(MalformedIntegerError) as cm:
            tokenize(b'li1ei' + b'1' * (MAX_INTEGER_DIGITS + 1) + b'ee')
        self.assertEqual(cm.exception.position, 4)

    def test_longest_integer(self):
        body = b'9' * MAX_INTEGER_DIGITS
        self.assertEqual(tokenize(b'i-' + body + b'e')[0].value, -int(body))

    def test_string_length_longer_than_buffer(self):
        with self.assertRaises(MalformedStringError) as cm:
            tokenize(b'i1e' + b'1' * 5000 + b':ab')
        self.assertEqual(cm.exception.position, 3)

    def test_lenient_length_with_many_leading_zeros(self):
        self.assertEqual(tokenize(b'0' * 5000 + b'2:ab')[0].value, b'ab')

    def test_unexpected_byte(self):
        with self.assertRaises(UnexpectedByteError) as cm:
            tokenize(b'i1ex')
        self.assertEqual(cm.exception.position, 3)


class TestTokenizeStrict(unittest.TestCase):
    def setUp(self):
        self.strict = DecodeOptions(strict=True)

    def test_lenient_accepts_non_canonical(self):
        self.assertEqual(tokenize(b'i-0e')[0].value, 0)
        self.assertEqual(tokenize(b'i042e')[0].value, 42)
        self.assertEqual(tokenize(b'02:ab')[0].value, b'ab')

    def test_negative_zero(self):
        with self.assertRaises(MalformedIntegerError):
            tokenize(b'i-0e', self.strict)

    def test_integer_leading_zero(self):
        for data in (b'i03e', b'i-03e', b'i00e'):
            with self.subTest(data=data):
                with self.assertRaises(MalformedIntegerError):
                    tokenize(data, self.strict)

    def test_string_length_leading_zero(self):
        with self.assertRaises(MalformedStringError):
            tokenize(b'02:ab', self.strict)

    def test_canonical_forms_pass(self):
        self.assertEqual(tokenize(b'i0e', self.strict)[0].value, 0)
        self.assertEqual(tokenize(b'0:', self.strict)[0].value, b'')
        self.assertEqual(tokenize(b'i-10e', self.strict)[0].value, -10)
