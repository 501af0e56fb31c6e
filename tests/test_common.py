#!/usr/bin/env python -O

"""
Common definitions used by test files.
"""

ASCII_AND_SELECTED_CODEPOINTS = (
    "\x00\x01\x02\x03\x04\x05\x06\x07\x08\t\n\x0b\x0c\r\x0e\x0f"
    "\x10\x11\x12\x13\x14\x15\x16\x17\x18\x19\x1a\x1b\x1c\x1d\x1e\x1f"
    " !\"#$%&'()*+,-./"
    "0123456789:;<=>?"
    "@ABCDEFGHIJKLMNO"
    'PQRSTUVWXYZ[\\]^_'
    "`abcdefghijklmno"
    "pqrstuvwxyz{|}~\x7f"
    "\u00A0\u0100\u2028\u2029\ufdec\ufeff\U0001D11E")

# Characters browsers strip from, or tolerate inside, a URL scheme.
SCHEME_NOISE = "\x00\t\n\r\x0b\x0c \x7f\u00a0\u2028\ufeff"
