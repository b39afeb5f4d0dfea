#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2018, Marsiske Stefan
# SPDX-License-Identifier: GPL-3.0-or-later

DIGITS      = 6    # passcode length
MAX_DIGITS  = 9    # 10**9 < 2**31, the truncated value is 31 bits
INTERVAL    = 30   # seconds per time step
# verify_current scans offsets 1..WINDOW-1 on either side of the current step
WINDOW      = 2
DIGEST      = 'sha1'
MIN_HASH    = 20   # sha1 output size

SECRET_SIZE = 20   # 160 bits as recommended by rfc4226

# rfc4648/3548
ALPHABET    = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
SHIFT       = 5
MASK        = len(ALPHABET) - 1
SEPARATOR   = '-'
MAX_ENCODE  = 1 << 28
