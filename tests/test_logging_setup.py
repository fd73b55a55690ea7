#!/usr/bin/env python
'''Logging is configured by the server entry point, not by library classes'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import logging
from b2f import main
from b2f.Session import Session, MASTER


def record_basic_config(monkeypatch):
	calls = []
	monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
	return calls


def test_session_leaves_root_logger_alone(monkeypatch):
	calls = record_basic_config(monkeypatch)

	Session("N0CALL", "RMS", "JO59", enable_debug=True)
	Session("N0CALL", "RMS", "JO59", role=MASTER)

	assert calls == []


def test_server_configures_logging(monkeypatch):
	calls = record_basic_config(monkeypatch)

	main.WinlinkServer(enable_debug=True)
	main.WinlinkServer(enable_debug=False)

	assert [c["level"] for c in calls] == [logging.DEBUG, logging.INFO]
