#!/usr/bin/env python3

import unittest, random, base64
from pwdotp import base32
from pwdotp.errors import InvalidCharacter, InputTooLarge, OTPError

# to just run the tests do
# python3 -m unittest discover --start-directory ../tests

# rfc4648 section 10, without the padding
vectors = [
  (b"", ""),
  (b"f", "MY"),
  (b"fo", "MZXQ"),
  (b"foo", "MZXW6"),
  (b"foob", "MZXW6YQ"),
  (b"fooba", "MZXW6YTB"),
  (b"foobar", "MZXW6YTBOI"),
]

class Huge:
  def __len__(self):
    return 1 << 28

class TestBase32(unittest.TestCase):
    def test_hello(self):
      self.assertEqual(base32.encode(bytes([0x48,0x65,0x6c,0x6c,0x6f])), "JBSWY3DP")
      self.assertEqual(base32.decode("JBSWY3DP"), b"Hello")

    def test_rfc4648(self):
      for raw, encoded in vectors:
        self.assertEqual(base32.encode(raw), encoded)
        self.assertEqual(base32.decode(encoded), raw)

    def test_matches_stdlib(self):
      for size in range(1, 41):
        raw = random.randbytes(size)
        self.assertEqual(base32.encode(raw), base64.b32encode(raw).decode().rstrip('='))

    def test_invert_random(self):
      for _ in range(500):
        raw = random.randbytes(random.randrange(0, 64))
        self.assertEqual(base32.decode(base32.encode(raw)), raw)

    def test_all_bytes(self):
      raw = bytes(range(256))
      self.assertEqual(base32.decode(base32.encode(raw)), raw)

    def test_output_length(self):
      for size in range(0, 33):
        encoded = base32.encode(b'\xff' * size)
        self.assertEqual(len(encoded), (8 * size + 4) // 5)
        self.assertEqual(len(base32.decode(encoded)), size)

    def test_uppercase_only(self):
      encoded = base32.encode(bytes(range(256)))
      self.assertEqual(encoded, encoded.upper())
      self.assertEqual(set(encoded) - set("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"), set())

    def test_case_insensitive(self):
      self.assertEqual(base32.decode("abcde"), base32.decode("ABCDE"))
      self.assertEqual(base32.decode("jBsWy3dP"), b"Hello")

    def test_separators(self):
      self.assertEqual(base32.decode("AB-CD E"), base32.decode("ABCDE"))
      self.assertEqual(base32.decode("  jbsw-y3dp \n"), b"Hello")
      self.assertEqual(base32.decode("JBSW Y3DP"), b"Hello")

    def test_empty(self):
      self.assertEqual(base32.encode(b''), '')
      self.assertEqual(base32.decode(''), b'')
      self.assertEqual(base32.decode('  - - '), b'')

    def test_bytes_input(self):
      self.assertEqual(base32.decode(b"JBSWY3DP\n"), b"Hello")

    def test_trailing_bits_dropped(self):
      # 7 chars = 35 bits -> 4 bytes, 3 bits dropped
      self.assertEqual(len(base32.decode("AAAAAAA")), 4)
      self.assertEqual(base32.decode("MZXW6YR"), b"foob")
      self.assertEqual(base32.decode("A"), b"")

    def test_invalid_char(self):
      with self.assertRaises(InvalidCharacter) as ctx:
        base32.decode("JBSW1Y3DP")
      self.assertEqual(ctx.exception.char, '1')
      self.assertEqual(ctx.exception.position, 4)
      self.assertIn("'1'", str(ctx.exception))

    def test_invalid_chars(self):
      for bad in ("MZXW6=", "MZ_XW", "MZ8", "MZ0", "ü", "ß", "MZ\tXW"):
        self.assertRaises(InvalidCharacter, base32.decode, bad)

    def test_non_ascii_bytes(self):
      with self.assertRaises(InvalidCharacter) as ctx:
        base32.decode("JBSWü".encode())
      self.assertEqual(ctx.exception.char, 'ü')
      with self.assertRaises(InvalidCharacter) as ctx:
        base32.decode(b"JBSW\xffY3DP")
      self.assertEqual(ctx.exception.char, '\xff')
      self.assertEqual(ctx.exception.position, 4)

    def test_errors_are_valueerrors(self):
      self.assertRaises(ValueError, base32.decode, "!")
      self.assertRaises(OTPError, base32.decode, "!")

    def test_too_large(self):
      with self.assertRaises(InputTooLarge) as ctx:
        base32.encode(Huge())
      self.assertEqual(ctx.exception.size, 1 << 28)

if __name__ == '__main__':
    unittest.main()
