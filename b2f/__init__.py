'''B2 Forwarding protocol session handshake'''

__author__ = "Bob Iannucci"
__copyright__ = "Copyright 2025, Bob Iannucci"
__license__ = "MIT"
__maintainer__ = __author__
__email__ = "bob@rail.com"
__status__ = "Experimental"

from b2f.B2FErrors import B2FError, MalformedSIDError, NoSIDError, NoB2FError, MalformedForwardLineError, SecureLoginConfigError, RemoteError, is_login_failure
from b2f.Address import Address
from b2f.Capabilities import Capabilities, encode_sid, local_sid_codes
from b2f.ForwarderList import parse_fw, format_fw
from b2f.SecureLogin import secure_login_response
from b2f.LineStream import LineStream
from b2f.Handshake import HandshakeResult, MasterHandshake, ClientHandshake
from b2f.Session import Session, MASTER, CLIENT
