#!/usr/bin/env python
'''Station address as used in ;FW forwarder lines'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"


class Address:
	"""A station callsign as listed in a ;FW line."""

	def __init__(self, callsign):
		self.callsign = callsign

	@classmethod
	def from_string(cls, text):
		return cls(text.strip())

	def __eq__(self, other):
		if not isinstance(other, Address):
			return NotImplemented
		return self.callsign == other.callsign

	def __hash__(self):
		return hash(self.callsign)

	def __str__(self):
		return self.callsign

	def __repr__(self):
		return f"Address({self.callsign!r})"
