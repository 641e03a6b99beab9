""" Python implementation of ADTP message construction. This includes the
    request and response builders, which accumulate the fields of a single
    outbound message and render them as JSON text, and the enumerations
    that define the literal tags used on the wire.
"""

# Utility components.

from . import json

# Submodules used by multiple other components.

from . import protocol

# Primary public-facing interfaces.

from .protocol.fields import Version, Method, Status
from .protocol.builder import RequestBuilder, ResponseBuilder
from .protocol.builder import SerializationError
from .protocol.factory import request, response

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
