#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

class OTPError(ValueError):
  pass

class InvalidConfiguration(OTPError):
  pass

class SigningFailure(OTPError):
  pass

class InvalidCharacter(OTPError):
  def __init__(self, char, position=None):
    self.char = char
    self.position = position
    super().__init__(f"illegal character: {char!r}")

class InputTooLarge(OTPError):
  def __init__(self, size, limit):
    self.size = size
    self.limit = limit
    super().__init__(f"input of {size} bytes is too large to encode, must be below {limit}")
