#!/usr/bin/env python
'''SID (capability announcement) encoding and decoding'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

# A SID line looks like [WL2K-2.8.4.8-B2FWIHJM$]
#   name    - the application name
#   version - the application version (may itself contain hyphens in the name part)
#   codes   - run of one or two character feature codes, '$' always last

import re
from b2f.B2FErrors import MalformedSIDError

SID_ACK_FOR_PM = "A"         # Acknowledge for personal messages
SID_FB_BASIC = "F"           # FBB basic ascii protocol supported
SID_FB_COMP0 = "B"           # FBB compressed protocol v0 supported
SID_FB_COMP1 = "B1"          # FBB compressed protocol v1 supported
SID_FB_COMP2 = "B2"          # FBB compressed protocol v2 (aka B2F) supported
SID_HL = "H"                 # Hierarchical Location designators supported
SID_MID = "M"                # Message identifier supported
SID_COMP_BATCH_F = "X"       # Compressed batch forwarding supported
SID_IDENTIFY = "I"           # Remote sends ";target de mycall QTC n"
SID_BID = "$"                # BID supported (must be last character in SID)
SID_GZIP = "G"               # Gzip compressed messages supported (experimental)

LOCAL_SID = SID_FB_COMP2 + SID_FB_BASIC + SID_HL + SID_MID + SID_BID

SID_PATTERN = re.compile(r"\[.*-(.*)\]")


def local_sid_codes(gzip_experiment=False) -> str:
	"""The codes we announce. The gzip code goes right before the terminating '$'."""
	if gzip_experiment:
		return LOCAL_SID[:-1] + SID_GZIP + LOCAL_SID[-1:]
	return LOCAL_SID


def encode_sid(app_name, app_version, gzip_experiment=False) -> str:
	"""Build the SID line, including the trailing carriage return."""
	return f"[{app_name}-{app_version}-{local_sid_codes(gzip_experiment)}]\r"


class Capabilities:
	"""The feature codes a remote station announced in its SID."""

	def __init__(self, codes=""):
		self.codes = codes.upper()

	@classmethod
	def decode(cls, line):
		"""Extract the codes following the last '-' inside the brackets."""
		match = SID_PATTERN.search(line)
		if match is None:
			raise MalformedSIDError(f"Bad SID line: {line}")
		return cls(match.group(1))

	def has(self, code) -> bool:
		# Plain substring test: a SID of "B2" also reports "B" (v0) as present.
		# Remote stations have been interoperating with this behavior, keep it.
		return code.upper() in self.codes

	@property
	def tokens(self):
		"""The codes split into tokens. A letter followed by a digit is one token (B1, B2)."""
		tokens = []
		i = 0
		while i < len(self.codes):
			if i + 1 < len(self.codes) and self.codes[i].isalpha() and self.codes[i + 1].isdigit():
				tokens.append(self.codes[i:i + 2])
				i += 2
			else:
				tokens.append(self.codes[i])
				i += 1
		return tokens

	def __bool__(self):
		return self.codes != ""

	def __eq__(self, other):
		if not isinstance(other, Capabilities):
			return NotImplemented
		return self.codes == other.codes

	def __hash__(self):
		return hash(self.codes)

	def __str__(self):
		return self.codes

	def __repr__(self):
		return f"Capabilities({self.codes!r})"
