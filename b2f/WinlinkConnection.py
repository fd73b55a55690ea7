#!/usr/bin/env python
'''Runs the master side of a B2F handshake over an accepted socket'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import logging
from b2f.B2FErrors import NoB2FError, is_login_failure
from b2f.LineStream import LineStream


class WinlinkConnection:
	def __init__(self, connection, address, timeout, session):
		"""Initialize the connection handler and encapsulate socket handling."""
		self.connection = connection
		self.address = address
		self.timeout = timeout  # Unified timeout value for all operations
		self.session = session
		self.enable_debug = session.enable_debug
		self.stream = None

		self.logger = logging.getLogger(__name__)

	def _log_debug(self, message):
		"""Log debug messages if debugging is enabled."""
		if self.enable_debug:
			self.logger.debug(message)

	def handle_connection(self):
		"""Handshake, then wait for the client to end the session."""
		try:
			self.connection.settimeout(self.timeout)
			self.stream = LineStream.from_socket(self.connection, enable_debug=self.enable_debug)
			self._handle_login()
			self.session.handshake(self.stream)
			self._handle_client_request()
		except NoB2FError as e:
			self.logger.error(f"{self.address}: {e}")
		except Exception as e:
			if is_login_failure(e):
				self.logger.error(f"{self.address}: secure login failed")
			else:
				self.logger.error(f"Error during connection handling: {e}")
		finally:
			# Ensure the connection is closed at the end of the method
			self._close_connection()

	def wait_for_input(self, prompt):
		"""Send prompt and wait for client response, terminated by a carriage return."""
		self.stream.write(prompt)
		self.stream.flush()
		return self.stream.next_line()

	def _handle_login(self):
		"""Telnet style login. The callsign becomes the handshake target, the password is not checked."""
		callsign = self.wait_for_input("Callsign :\r")
		if callsign:
			self.session.targetcall = callsign.upper()
		self.wait_for_input("Password :\r")

	def _handle_client_request(self):
		"""Message transfer is not supported here, so anything but FF just ends the session."""
		request = self.stream.next_line()
		if request.startswith("FF"):
			self._handle_no_messages(request)
		else:
			self.logger.info(f"Unsupported request from {self.address}: {request}")

	def _handle_no_messages(self, message):
		"""Handle the 'FF' request indicating no messages to process."""
		self._log_debug(f"No message condition: {message}")

		# Send "FQ" followed by a carriage return
		self.stream.write("FQ\r")
		self.stream.flush()

	def _close_connection(self):
		if self.connection:
			self.logger.info(f"Closing connection to {self.address}")
			if self.stream:
				self.stream.close()
			self.connection.close()
