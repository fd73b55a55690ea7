#!/usr/bin/env python
'''In-memory streams for exercising the handshake'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

import io
from b2f.LineStream import LineStream


def make_stream(incoming):
	"""Returns a LineStream reading `incoming` and the BytesIO it writes to."""
	reader = io.BufferedReader(io.BytesIO(incoming.encode()))
	writer = io.BytesIO()
	return LineStream(reader, writer), writer
