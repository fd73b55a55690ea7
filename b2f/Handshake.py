#!/usr/bin/env python
'''B2F handshake state machine for both session roles'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

# The master speaks first: MOTD, then its own handshake, then it reads the
# client's. The client reads the master's handshake, answers any secure login
# challenge and sends its own handshake in reply.
#
#   master: START -> SEND_HANDSHAKE -> READ_REMOTE -> POST_READ -> DONE
#   client: START -> READ_REMOTE -> POST_READ -> SEND_HANDSHAKE -> DONE

import logging
from b2f.B2FErrors import NoSIDError, NoB2FError
from b2f.Capabilities import Capabilities, encode_sid, SID_FB_COMP2
from b2f.ForwarderList import parse_fw, format_fw
from b2f.SecureLogin import CHALLENGE_PREFIX, parse_challenge, respond_to_challenge, format_secure_response

START = "START"
SEND_HANDSHAKE = "SEND_HANDSHAKE"
READ_REMOTE = "READ_REMOTE"
POST_READ = "POST_READ"
DONE = "DONE"

COMMAND_START = b'F'
PROMPT = ">"


class HandshakeResult:
	"""What the remote told us during its half of the handshake."""

	def __init__(self):
		self.sid = None
		self.fw = []
		self.secure_challenge = ""


class Handshake:
	TRANSITIONS = {}

	def __init__(self, session, stream):
		self.session = session
		self.stream = stream
		self.enable_debug = session.enable_debug
		self.state = START
		self.result = None
		self.secure_response = ""
		self.logger = logging.getLogger(__name__)

	def _log_debug(self, message):
		"""Log debug messages if debugging is enabled."""
		if self.enable_debug:
			self.logger.debug(message)

	def _log_state_change(self, new_state):
		if self.state != new_state:
			self._log_debug(f"State changed from {self.state} to {new_state}")
			self.state = new_state

	def run(self):
		"""Drive the handshake to completion. Errors propagate to the caller."""
		while self.state != DONE:
			if self.state == START:
				self._handle_start()
			elif self.state == SEND_HANDSHAKE:
				self._handle_send_handshake()
			elif self.state == READ_REMOTE:
				self._handle_read_remote()
			elif self.state == POST_READ:
				self._handle_post_read()
			else:
				raise RuntimeError(f"Unknown handshake state {self.state}")

			self._log_state_change(self.TRANSITIONS[self.state])
		return self.result

	def _handle_start(self):
		pass

	def _handle_send_handshake(self):
		self.send_handshake(self.secure_response)

	def _handle_read_remote(self):
		self.result = self.read_handshake()

	def _handle_post_read(self):
		if not self.result.sid:
			raise NoSIDError("No sid in handshake")

		self.session.remote_sid = self.result.sid
		self.session.remote_fw = self.result.fw
		self._log_debug(f"Remote SID: {self.result.sid}, FW: {' '.join(str(a) for a in self.result.fw)}")

		if self.result.secure_challenge:
			self.secure_response = self.answer_challenge(self.result.secure_challenge)

	def read_handshake(self):
		"""Read the remote's handshake lines until it prompts or starts sending commands."""
		result = HandshakeResult()

		while True:
			if self.stream.peek() == COMMAND_START:
				return result  # Next line is a protocol command, handshake is done

			# Servers send lines like '*** MTD Stats Total connects = 2580' here
			# which are not errors
			line = self.stream.next_line(parse_remote_errors=False)

			if "[" in line:  # [WL2K-2.8.4.8-B2FWIHJM$]
				result.sid = Capabilities.decode(line)
				if not result.sid.has(SID_FB_COMP2):
					raise NoB2FError()
			elif line.startswith(";FW"):
				result.fw = parse_fw(line)
			elif line.startswith(CHALLENGE_PREFIX):
				result.secure_challenge = parse_challenge(line)
			elif line.endswith(PROMPT):
				return result
			else:
				self._log_debug(f"Ignoring: <{line}>")

	def answer_challenge(self, challenge):
		self._log_debug("Answering secure login challenge")
		return respond_to_challenge(challenge, self.session.secure_login_handle_func, self.session.secure_login_response_func)

	def send_handshake(self, secure_response=""):
		session = self.session
		self.stream.write(format_fw(session.local_fw, secure_response))
		self.stream.write(encode_sid(session.app_name, session.app_version, session.gzip_experiment))
		if secure_response:
			self.stream.write(format_secure_response(secure_response))

		trailer = f"; {session.targetcall} DE {session.mycall} ({session.locator})"
		if self.is_master:
			trailer += PROMPT
		self.stream.write(trailer + "\r")
		self.stream.flush()

	@property
	def is_master(self):
		return False


class MasterHandshake(Handshake):
	"""The side that speaks first and owns the message of the day."""

	TRANSITIONS = {
		START: SEND_HANDSHAKE,
		SEND_HANDSHAKE: READ_REMOTE,
		READ_REMOTE: POST_READ,
		POST_READ: DONE,
	}

	def _handle_start(self):
		for line in self.session.motd:
			self.stream.write(f"{line}\r")

	@property
	def is_master(self):
		return True


class ClientHandshake(Handshake):
	"""The side that reacts to the master's handshake."""

	TRANSITIONS = {
		START: READ_REMOTE,
		READ_REMOTE: POST_READ,
		POST_READ: SEND_HANDSHAKE,
		SEND_HANDSHAKE: DONE,
	}
