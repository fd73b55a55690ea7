#!/usr/bin/env python
'''Carriage return terminated line I/O over a buffered byte stream'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import logging
from b2f.B2FErrors import RemoteError

REMOTE_ERROR_MARKER = "*** "


class LineStream:
	def __init__(self, reader, writer, enable_debug=False):
		"""reader must support peek() and read() (io.BufferedReader); writer needs write() and flush()."""
		self.reader = reader
		self.writer = writer
		self.enable_debug = enable_debug
		self.logger = logging.getLogger(__name__)

	@classmethod
	def from_socket(cls, connection, enable_debug=False):
		return cls(connection.makefile("rb"), connection.makefile("wb"), enable_debug=enable_debug)

	def _log_debug(self, message):
		"""Log debug messages if debugging is enabled."""
		if self.enable_debug:
			self.logger.debug(message)

	def peek(self) -> bytes:
		"""Return the next byte without consuming it."""
		data = self.reader.peek(1)
		if not data:
			raise EOFError("Connection closed by remote")
		return data[:1]

	def next_line(self, parse_remote_errors=True) -> str:
		"""Read the next line, terminated by a carriage return.

		Lines containing '*** ' are reported by the remote as errors. With
		parse_remote_errors off they are returned like any other line, since
		some servers send informational '*** ...' banners during the handshake.
		"""
		response = b""

		# Keep reading until a carriage return (\r) is encountered
		while True:
			byte = self.reader.read(1)
			if not byte:
				raise EOFError(f"Connection closed by remote after {len(response)} bytes")
			response += byte
			if byte == b'\r':
				break

		line = response.decode(errors="replace").strip()
		self._log_debug(f"Received: <{line}>")

		idx = line.rfind(REMOTE_ERROR_MARKER)
		if parse_remote_errors and idx >= 0:
			raise RemoteError(line[idx:])
		return line

	def write(self, data):
		self.writer.write(data.encode())
		if len(data) > 0:
			self._log_debug(f"Sent: <{data.strip()}>")

	def flush(self):
		self.writer.flush()

	def close(self):
		self.reader.close()
		self.writer.close()
