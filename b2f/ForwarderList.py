#!/usr/bin/env python
'''Parsing and formatting of ;FW forwarder lines'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

# ;FW: N0CALL N0AUX|12345678
#   The first address is the login call, authenticated by the ;PR line.
#   Auxiliary addresses carry the secure login response inline after '|'.

from b2f.Address import Address
from b2f.B2FErrors import MalformedForwardLineError

FW_PREFIX = ";FW: "


def parse_fw(line):
	"""Return the addresses in a ;FW line. Inline password hashes are dropped."""
	if not line.startswith(FW_PREFIX):
		raise MalformedForwardLineError("Malformed forward line")

	addresses = []
	for entry in line[len(FW_PREFIX):].split(" "):
		callsign = entry.split("|")[0]
		addresses.append(Address.from_string(callsign))
	return addresses


def format_fw(addresses, secure_response="") -> str:
	"""Request messages on behalf of every address."""
	line = ";FW:"
	for i, address in enumerate(addresses):
		# Password hash for auxiliary calls is required by WL2K-4.x or later
		if secure_response and i > 0:
			line += f" {address.callsign}|{secure_response}"
		else:
			line += f" {address.callsign}"
	return line + "\r"
