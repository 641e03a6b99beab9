"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

import enum


class Version(str, enum.Enum):
    """ Versions of the ADTP protocol understood by this implementation.
    """

    ADTP2 = 'ADTP/2.0'


class Method(str, enum.Enum):
    """ Operations a request can ask the remote side to perform.
    """

    CHECK = 'check'
    READ = 'read'
    CREATE = 'create'
    UPDATE = 'update'
    APPEND = 'append'
    DESTROY = 'destroy'
    AUTH = 'auth'


class Status(str, enum.Enum):
    """ Outcome codes carried by a response.
    """

    SWITCH_PROTOCOLS = 'switch-protocols'
    OK = 'ok'
    PENDING = 'pending'
    REDIRECT = 'redirect'
    DENIED = 'denied'
    BAD_REQUEST = 'bad-request'
    UNAUTHORIZED = 'unauthorized'
    NOT_FOUND = 'not-found'
    TOO_MANY_REQUESTS = 'too-many-requests'
    INTERNAL_ERROR = 'internal-error'


# Field names, as they appear on the wire.

VERSION = 'version'
METHOD = 'method'
STATUS = 'status'
HEADERS = 'headers'
URI = 'uri'
CONTENT = 'content'

# Serialized key order for each message kind.

REQUEST_FIELDS = (VERSION, METHOD, HEADERS, URI, CONTENT)
RESPONSE_FIELDS = (VERSION, STATUS, HEADERS, CONTENT)

DEFAULT_VERSION = Version.ADTP2
DEFAULT_METHOD = Method.CHECK
DEFAULT_STATUS = Status.OK

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
