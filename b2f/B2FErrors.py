#!/usr/bin/env python
'''Errors raised while negotiating a B2F session'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"


class B2FError(Exception):
	"""Base class for handshake protocol errors (transport errors are never wrapped)."""


class MalformedSIDError(B2FError):
	"""The line did not have the [name-version-codes] structure."""


class NoSIDError(B2FError):
	"""The remote finished its handshake without announcing a SID."""


class NoB2FError(B2FError):
	"""The remote SID lacks the B2 code. Callers may fall back to an older protocol."""

	def __init__(self, message="Remote does not support B2 Forwarding Protocol"):
		super().__init__(message)


class MalformedForwardLineError(B2FError):
	"""A ;FW line without the ';FW: ' prefix."""


class SecureLoginConfigError(B2FError):
	"""A secure login challenge arrived but no password handler is registered."""


class RemoteError(B2FError):
	"""The remote station reported an error as a '*** ...' line."""


def is_login_failure(err) -> bool:
	"""True if the error is known to report that the secure login failed.

	There is no status code for this at the handshake stage, so the check is
	a case-insensitive match on the text the remote sends back.
	"""
	if err is None:
		return False
	return "secure login failed" in str(err).lower()
