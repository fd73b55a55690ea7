#!/usr/bin/env python
'''Per-connection B2F session state'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import logging
from b2f.Address import Address
from b2f.Handshake import MasterHandshake, ClientHandshake
from b2f.SecureLogin import secure_login_response

MASTER = "master"
CLIENT = "client"

APP_NAME = "B2FPy"
APP_VERSION = "1.0"


class Session:
	def __init__(self, mycall, targetcall, locator, role=CLIENT, local_fw=None, motd=None,
			secure_login_handle_func=None, secure_login_response_func=secure_login_response,
			app_name=APP_NAME, app_version=APP_VERSION, gzip_experiment=False, enable_debug=False):
		"""Set up a session between mycall and targetcall.

		local_fw lists the addresses we request messages for and defaults to
		mycall alone. secure_login_handle_func is called with no arguments to
		get the password when the remote sends a secure login challenge.
		"""
		if role not in (MASTER, CLIENT):
			raise ValueError(f"Unknown session role {role}")

		self.mycall = mycall
		self.targetcall = targetcall
		self.locator = locator
		self.role = role
		self.local_fw = local_fw if local_fw is not None else [Address(mycall)]
		self.motd = motd or []
		self.secure_login_handle_func = secure_login_handle_func
		self.secure_login_response_func = secure_login_response_func
		self.app_name = app_name
		self.app_version = app_version
		self.gzip_experiment = gzip_experiment
		self.enable_debug = enable_debug

		# Filled in by the handshake
		self.remote_sid = None
		self.remote_fw = []

		self.logger = logging.getLogger(__name__)

	@property
	def is_master(self):
		return self.role == MASTER

	def handshake(self, stream):
		"""Run the handshake for our role over a LineStream. Returns the HandshakeResult."""
		if self.is_master:
			handshake = MasterHandshake(self, stream)
		else:
			handshake = ClientHandshake(self, stream)

		result = handshake.run()
		self.logger.info(f"Handshake with {self.targetcall} complete, remote SID {self.remote_sid}")
		return result
