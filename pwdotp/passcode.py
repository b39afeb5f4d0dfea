#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

"""HOTP (rfc4226) passcodes, and TOTP (rfc6238) on top of them by deriving
the counter from the clock.

The generator never sees the secret, it only gets a signer: a callable
mapping a message to its HMAC under the shared secret. Use hmac_signer() for
the usual case, or pass anything with the same behaviour (eg. a test double).
"""

import hmac, hashlib, time
from typing import Protocol
from pwdotp.consts import DIGITS, MAX_DIGITS, INTERVAL, WINDOW, DIGEST, MIN_HASH
from pwdotp.errors import InvalidConfiguration, SigningFailure

class Signer(Protocol):
  def __call__(self, msg: bytes) -> bytes: ...

def hmac_signer(secret, digest=DIGEST):
  try:
    size = hashlib.new(digest).digest_size
  except (ValueError, TypeError) as e:
    raise InvalidConfiguration(f"unsupported digest: {digest!r}") from e
  if size < MIN_HASH:
    raise InvalidConfiguration(f"digest {digest} is too short: {size} bytes, need at least {MIN_HASH}")
  secret = bytes(secret)
  def sign(msg):
    # a fresh hmac per call, nothing is shared between threads
    return hmac.new(secret, msg, digest).digest()
  return sign

def truncate(mac, digits):
  # dynamic truncation, rfc4226 section 5.3
  offset = mac[-1] & 0x0f if mac else 0
  if len(mac) < offset + 4:
    raise InvalidConfiguration(f"hash output of {len(mac)} bytes is too short for offset {offset}")
  # the top byte is masked *before* shifting, keep this order
  binary = (((mac[offset] & 0x7f) << 24) |
            ((mac[offset+1] & 0xff) << 16) |
            ((mac[offset+2] & 0xff) << 8) |
             (mac[offset+3] & 0xff)) & 0x7fffffff
  return str(binary % 10 ** digits).zfill(digits)

def window(name, steps):
  if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
    raise InvalidConfiguration(f"{name} must be a non-negative number of steps, not {steps!r}")
  return steps

class PasscodeGenerator:
  def __init__(self, signer: Signer, digits: int = DIGITS, interval: int = INTERVAL, clock=time.time):
    if not callable(signer):
      raise InvalidConfiguration("signer must be callable")
    if isinstance(digits, bool) or not isinstance(digits, int) or not 0 < digits <= MAX_DIGITS:
      raise InvalidConfiguration(f"digits must be between 1 and {MAX_DIGITS}, not {digits!r}")
    if isinstance(interval, bool) or not isinstance(interval, int) or not interval > 0:
      raise InvalidConfiguration(f"interval must be a positive whole number of seconds, not {interval!r}")
    self._signer = signer
    self._digits = digits
    self._interval = interval
    self._clock = clock

  @classmethod
  def from_secret(cls, secret, digits=DIGITS, interval=INTERVAL, digest=DIGEST, clock=time.time):
    return cls(hmac_signer(secret, digest), digits, interval, clock)

  @property
  def digits(self):
    return self._digits

  @property
  def interval(self):
    return self._interval

  def _sign(self, msg):
    try:
      mac = self._signer(msg)
    except Exception as e:
      raise SigningFailure(f"signer failed: {e}") from e
    if not isinstance(mac, (bytes, bytearray, memoryview)):
      raise SigningFailure(f"signer returned {type(mac).__name__}, expected bytes")
    return bytes(mac)

  def generate_from_bytes(self, challenge):
    return truncate(self._sign(bytes(challenge)), self._digits)

  def generate_from_counter(self, counter):
    # network byte order, regardless of the host
    return self.generate_from_bytes(counter.to_bytes(8, 'big', signed=True))

  def current_time_step(self):
    return int(self._clock()) // self._interval

  def remaining(self):
    """seconds until the current passcode expires"""
    now = int(self._clock())
    return self._interval - now % self._interval

  def generate_current(self):
    return self.generate_from_counter(self.current_time_step())

  def _match(self, counter, candidate):
    return hmac.compare_digest(self.generate_from_counter(counter).encode(),
                               candidate.encode())

  def verify_counter(self, counter, candidate):
    if not isinstance(candidate, str):
      return False
    return self._match(counter, candidate)

  def verify_current(self, candidate, past=WINDOW, future=WINDOW):
    """checks candidate against the current time step, the steps
    t-1..t-(past-1) and t+1..t+(future-1). the bounds are exclusive, with
    the default window of 2 one adjacent step is accepted on either side.
    """
    past = window("past", past)
    future = window("future", future)
    if not isinstance(candidate, str):
      return False
    t = self.current_time_step()
    if self._match(t, candidate):
      return True
    for i in range(1, past):
      if self._match(t - i, candidate):
        return True
    for i in range(1, future):
      if self._match(t + i, candidate):
        return True
    return False
