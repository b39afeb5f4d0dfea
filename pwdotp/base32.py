#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

from types import MappingProxyType
from pwdotp.consts import ALPHABET, SHIFT, MASK, SEPARATOR, MAX_ENCODE
from pwdotp.errors import InvalidCharacter, InputTooLarge

# unpadded base32, case-insensitive on decode. unlike base64.b32decode this
# tolerates missing '=' padding and the separators people type in when
# copying secrets by hand.

charmap = MappingProxyType({c: i for i, c in enumerate(ALPHABET)})

def encode(data):
  if len(data) == 0:
    return ''
  if len(data) >= MAX_ENCODE:
    raise InputTooLarge(len(data), MAX_ENCODE)

  result = []
  buffer = 0
  bits = 0
  for byte in data:
    buffer = (buffer << 8) | (byte & 0xff)
    bits += 8
    while bits >= SHIFT:
      bits -= SHIFT
      result.append(ALPHABET[(buffer >> bits) & MASK])
    buffer &= (1 << bits) - 1
  if bits > 0:
    # pad the last group on its low bits
    result.append(ALPHABET[(buffer << (SHIFT - bits)) & MASK])
  return ''.join(result)

def clean(encoded):
  if isinstance(encoded, (bytes, bytearray)):
    try:
      encoded = encoded.decode('utf8')
    except UnicodeDecodeError as e:
      # name the undecodable byte itself
      raise InvalidCharacter(encoded[e.start:e.start+1].decode('latin1'), e.start) from None
  return encoded.strip().replace(SEPARATOR, '').replace(' ', '')

def decode(encoded):
  encoded = clean(encoded)
  if not encoded:
    return b''

  result = bytearray()
  buffer = 0
  bits = 0
  for pos, c in enumerate(encoded):
    # per character so that eg. 'ß'.upper() == 'SS' cannot sneak in
    try:
      v = charmap[c.upper()]
    except KeyError:
      raise InvalidCharacter(c, pos) from None
    buffer = (buffer << SHIFT) | v
    bits += SHIFT
    if bits >= 8:
      bits -= 8
      result.append((buffer >> bits) & 0xff)
      buffer &= (1 << bits) - 1
  # leftover bits that do not make a full byte are dropped
  return bytes(result)
