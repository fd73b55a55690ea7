#!/usr/bin/env python
'''Parsing and formatting ;FW lines'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import pytest
from b2f.Address import Address
from b2f.B2FErrors import MalformedForwardLineError
from b2f.ForwarderList import parse_fw, format_fw


def test_parse_single():
	assert parse_fw(";FW: N0CALL") == [Address("N0CALL")]


def test_parse_drops_password_hashes():
	addresses = parse_fw(";FW: N0CALL N0AUX|12345678 N1AUX|87654321")
	assert [a.callsign for a in addresses] == ["N0CALL", "N0AUX", "N1AUX"]
	assert [str(a) for a in addresses] == ["N0CALL", "N0AUX", "N1AUX"]


@pytest.mark.parametrize("line", [";FW:N0CALL", ";FW N0CALL", "FW: N0CALL", ""])
def test_parse_requires_prefix(line):
	with pytest.raises(MalformedForwardLineError):
		parse_fw(line)


def test_format_without_secure_response():
	addresses = [Address("N0CALL"), Address("N0AUX")]
	assert format_fw(addresses) == ";FW: N0CALL N0AUX\r"


def test_format_adds_hash_to_auxiliary_addresses_only():
	addresses = [Address("N0CALL"), Address("N0AUX"), Address("N1AUX")]
	assert format_fw(addresses, "RESP") == ";FW: N0CALL N0AUX|RESP N1AUX|RESP\r"


def test_format_no_addresses():
	assert format_fw([], "RESP") == ";FW:\r"


def test_formatted_line_parses_back():
	addresses = [Address("N0CALL"), Address("LA5NTA"), Address("W1AW")]
	line = format_fw(addresses, "12345678")

	segments = line.rstrip("\r")[len(";FW: "):].split(" ")
	assert "|" not in segments[0]
	assert all(s.endswith("|12345678") for s in segments[1:])

	assert parse_fw(line.rstrip("\r")) == addresses
