#!/usr/bin/env python
'''Simple Winlink Server that negotiates B2F sessions with incoming stations'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import logging
import os
import socket
import threading
from b2f.Session import Session, MASTER
from b2f.WinlinkConnection import WinlinkConnection

LISTEN_IP = "0.0.0.0"
LISTEN_PORT = 8772
SIMULTANEOUS_CONNECTION_MAX = 5
CONNECTION_READ_TIMEOUT_SECONDS = 60

MYCALL = "N0CALL"
LOCATOR = "JO59"
MOTD = ["Welcome to the B2F test server"]


def gzip_experiment_enabled():
	return os.environ.get("GZIP_EXPERIMENT") == "1"


class WinlinkServer:
	def __init__(self, host=LISTEN_IP, port=LISTEN_PORT, enable_debug=True):
		"""Initialize the server with default host and port."""
		self.host = host
		self.port = port
		self.enable_debug = enable_debug
		self.gzip_experiment = gzip_experiment_enabled()

		# Set up logging
		self._setup_logging()

	def _setup_logging(self):
		"""Set up logging configuration."""
		log_level = logging.DEBUG if self.enable_debug else logging.INFO
		logging.basicConfig(level=log_level,
							format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

	def new_session(self):
		# targetcall is replaced by the callsign the station logs in with
		return Session(MYCALL, "UNKNOWN", LOCATOR, role=MASTER, motd=MOTD,
				gzip_experiment=self.gzip_experiment, enable_debug=self.enable_debug)

	def start_server(self):
		"""Main listening loop that accepts new connections."""
		server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
		try:
			server_socket.bind((self.host, self.port))
		except socket.error as e:
			print(f"Error binding to {self.host}:{self.port} - {e}")
			return
		server_socket.listen(SIMULTANEOUS_CONNECTION_MAX)
		print(f"Server is listening on {self.host}:{self.port}")

		try:
			while True:
				# Accept a new connection
				connection, address = server_socket.accept()
				print(f"Connection established with {address}")

				# Fork a new thread to handle the connection
				handler = WinlinkConnection(connection, address, timeout=CONNECTION_READ_TIMEOUT_SECONDS, session=self.new_session())
				threading.Thread(target=handler.handle_connection).start()

		except KeyboardInterrupt:
			print("Winlink Server interrupted, shutting down...")
		finally:
			server_socket.close()


def main():
	server = WinlinkServer()
	server.start_server()


if __name__ == "__main__":
	main()
