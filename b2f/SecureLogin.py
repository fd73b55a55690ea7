#!/usr/bin/env python
'''Winlink secure login challenge and response'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

# The challenger sends   ;PQ: <challenge>
# The responder answers  ;PR: <response>
# where response is derived from the challenge and the station password.

import hashlib
from b2f.B2FErrors import SecureLoginConfigError

CHALLENGE_PREFIX = ";PQ"
RESPONSE_PREFIX = ";PR: "

WINLINK_SECURE_SALT = bytes([
	77, 197, 101, 206, 190, 249, 93, 200, 51, 243, 93, 237, 71, 94, 239, 138,
	68, 108, 70, 185, 225, 137, 217, 16, 51, 122, 193, 48, 194, 195, 198, 175,
	172, 169, 70, 84, 61, 62, 104, 186, 114, 52, 61, 168, 66, 129, 192, 208,
	187, 249, 232, 193, 41, 113, 41, 45, 240, 16, 29, 228, 208, 228, 61, 20,
])


def parse_challenge(line) -> str:
	"""The challenge payload is everything after ';PQ: '."""
	return line[5:]


def secure_login_response(challenge, password) -> str:
	"""Compute the 8 digit response to a ;PQ challenge."""
	digest = hashlib.md5(challenge.encode() + password.encode() + WINLINK_SECURE_SALT).digest()
	value = (digest[3] & 0x3F) << 24 | digest[2] << 16 | digest[1] << 8 | digest[0]
	return f"{value:08d}"[-8:]


def format_secure_response(response) -> str:
	return f"{RESPONSE_PREFIX}{response}\r"


def respond_to_challenge(challenge, password_func, response_func=secure_login_response) -> str:
	"""Ask for the password and answer the challenge.

	password_func may block (waiting on the user) and any exception it raises
	is passed on to the caller, aborting the handshake.
	"""
	if password_func is None:
		raise SecureLoginConfigError("Got secure login challenge, please register a secure login handler.")

	password = password_func()
	return response_func(challenge, password)
