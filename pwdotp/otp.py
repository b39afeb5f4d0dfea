#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018-2024, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

import sys, getpass, time
from SecureString import clearmem
import pysodium

from pwdotp import base32
from pwdotp.config import getcfg, otpcfg
from pwdotp.consts import SECRET_SIZE
from pwdotp.passcode import PasscodeGenerator
from pwdotp.utils import group

#### config ####

cfg = otpcfg(getcfg('pwdotp'))

verbose = cfg['verbose']
digits = cfg['digits']
interval = cfg['interval']
past = cfg['past']
future = cfg['future']
digest = cfg['digest']
clock = time.time

if verbose:
    print("digits:", digits, file=sys.stderr)
    print("interval:", interval, file=sys.stderr)
    print("past:", past, file=sys.stderr)
    print("future:", future, file=sys.stderr)
    print("digest:", digest, file=sys.stderr)

#### Helper fns ####

def getsecret():
  if sys.stdin.isatty():
    encoded = getpass.getpass("two step verification secret: ")
  else:
    encoded = sys.stdin.readline().rstrip('\n')
  secret = base32.decode(encoded)
  if not secret:
    raise ValueError("ERROR: empty secret")
  return secret

def wipe(buf):
  # single byte and empty bytes objects are shared by the interpreter
  if len(buf) > 1: clearmem(buf)

def generator(secret):
  return PasscodeGenerator.from_secret(secret, digits, interval, digest, clock)

#### OPs ####

def new(size=SECRET_SIZE):
  secret = pysodium.randombytes(size)
  ret = group(base32.encode(secret))
  wipe(secret)
  return ret

def code(secret):
  g = generator(secret)
  ret = g.generate_current()
  if not g.verify_current(ret, past, future):
    raise ValueError("timeout code couldn't be verified!")
  if verbose: print(f"valid for {g.remaining()}s", file=sys.stderr)
  return ret

def hotp(secret, counter):
  return generator(secret).generate_from_counter(counter)

def verify(secret, candidate, counter=None):
  g = generator(secret)
  if counter is None:
    return g.verify_current(candidate, past, future)
  return g.verify_counter(counter, candidate)

def encode():
  return base32.encode(sys.stdin.buffer.read())

def decode():
  return base32.decode(sys.stdin.read())

#### main ####

def usage(params, help=False):
  print("usage:")
  print("       %s new [<size>]" % params[0])
  print("       echo -n 'secret' | %s code" % params[0])
  print("       echo -n 'secret' | %s hotp <counter>" % params[0])
  print("       echo -n 'secret' | %s verify <code> [<counter>]" % params[0])
  print("       %s encode <raw" % params[0])
  print("       echo -n 'secret' | %s decode >raw" % params[0])
  if help: sys.exit(0)
  sys.exit(100)

def intarg(params, idx):
  try:
    return int(params[idx])
  except ValueError:
    usage(params)

def main(params=sys.argv):
  if len(params) < 2: usage(params, True)
  cmd = None
  args = []
  if params[1] in ('help', '-h', '--help'):
    usage(params, True)
  elif params[1] == 'new':
    if len(params) > 3: usage(params)
    size = intarg(params, 2) if len(params) == 3 else SECRET_SIZE
    if size < 1: usage(params)
    cmd = new
    args = (size,)
  elif params[1] == 'code':
    if len(params) != 2: usage(params)
    cmd = code
  elif params[1] == 'hotp':
    if len(params) != 3: usage(params)
    cmd = hotp
    args = (intarg(params, 2),)
  elif params[1] == 'verify':
    if len(params) not in (3, 4): usage(params)
    cmd = verify
    args = (params[2],)
    if len(params) == 4:
      args += (intarg(params, 3),)
  elif params[1] == 'encode':
    if len(params) != 2: usage(params)
    cmd = encode
  elif params[1] == 'decode':
    if len(params) != 2: usage(params)
    cmd = decode
  else:
    usage(params)

  error = None
  if cmd in {code, hotp, verify}:
    secret = None
    try:
      secret = getsecret()
      ret = cmd(secret, *args)
    except (ValueError, OverflowError) as exc:
      error = exc
      ret = False
    finally:
      if secret: wipe(secret)
  else:
    try:
      ret = cmd(*args)
    except ValueError as exc:
      error = exc
      ret = False

  if error:
    print(error, file=sys.stderr)
    sys.exit(1) # generic errors

  if cmd == verify:
    if not ret:
      print("fail", file=sys.stderr)
      sys.exit(2) # code mismatch
    if verbose: print("ok", file=sys.stderr)
  elif cmd == decode:
    sys.stdout.buffer.write(ret)
    sys.stdout.flush()
    wipe(ret)
  else:
    print(ret)
    sys.stdout.flush()

if __name__ == '__main__':
  main(sys.argv)
