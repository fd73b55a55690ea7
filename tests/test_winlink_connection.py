#!/usr/bin/env python
'''Listener connection handling over a socket pair'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import socket
from b2f.Session import Session, MASTER
from b2f.WinlinkConnection import WinlinkConnection


def run_connection(incoming):
	"""Feed `incoming` to a master-side connection and return everything it sent back."""
	server_side, client_side = socket.socketpair()
	client_side.settimeout(5)
	client_side.sendall(incoming.encode())
	client_side.shutdown(socket.SHUT_WR)

	session = Session("N0CALL", "UNKNOWN", "JO59", role=MASTER, motd=["Hello"], app_name="B2FPy", app_version="1.0")
	handler = WinlinkConnection(server_side, "test", timeout=5, session=session)
	handler.handle_connection()

	received = b""
	while True:
		chunk = client_side.recv(4096)
		if not chunk:
			break
		received += chunk
	client_side.close()
	return session, received


def test_session_ends_with_fq():
	session, received = run_connection("n0test\rCMSTelnet\r[Pat-0.1-B2FHM$]\r;FW: N0TEST\r; N0CALL DE N0TEST (JO59)\rFF\r")

	assert received == (b"Callsign :\rPassword :\rHello\r;FW: N0CALL\r[B2FPy-1.0-B2FHM$]\r"
						b"; N0TEST DE N0CALL (JO59)>\rFQ\r")
	assert session.targetcall == "N0TEST"
	assert session.remote_sid.has("B2")


def test_remote_without_b2_is_disconnected():
	session, received = run_connection("N0TEST\rCMSTelnet\r[Old-1.0-FHM$]\r>\r")

	assert received.endswith(b"; N0TEST DE N0CALL (JO59)>\r")
	assert session.remote_sid is None


def test_remote_hangs_up():
	session, received = run_connection("N0TEST\r")

	assert received == b"Callsign :\rPassword :\r"


def test_login_password_is_not_checked():
	session, received = run_connection("n0test\rwrong password\r[Pat-0.1-B2FHM$]\rFF\r")

	assert received.startswith(b"Callsign :\rPassword :\r")
	assert received.endswith(b"; N0TEST DE N0CALL (JO59)>\rFQ\r")
	assert session.targetcall == "N0TEST"


def test_empty_callsign_keeps_target():
	session, received = run_connection("\rCMSTelnet\r[Pat-0.1-B2FHM$]\rFF\r")

	assert b"; UNKNOWN DE N0CALL (JO59)>\r" in received
	assert session.targetcall == "UNKNOWN"
