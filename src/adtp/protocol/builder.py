""" Fluent builders for outbound ADTP messages. A builder accumulates the
    fields of a single message through chained setter calls, and renders
    the current state as JSON text via :func:`Builder.build`. A builder is
    never frozen by building; it can be modified and built again.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Tuple

from .. import json
from . import fields
from .fields import Method, Status, Version

logger = logging.getLogger(__name__)


class SerializationError(ValueError):
    """ Raised by :func:`Builder.build` when a caller-supplied value cannot
        be represented as JSON text; the underlying encoder exception is
        chained as the cause.
    """


class Builder:
    """ The :class:`Builder` holds the fields common to every ADTP message:
        the protocol *version*, the *headers*, and the opaque *content*.
        Subclasses add the message-specific fields and declare the order
        in which fields are serialized.

        :ivar version: A :class:`Version` member.
        :ivar headers: A dictionary of header names to header values.
        :ivar content: The message payload, kept as an opaque string.
        :ivar field_order: Tuple of field names, in serialization order.
    """

    field_order: Tuple[str, ...] = ()

    def __init__(self):

        self.version: Version = fields.DEFAULT_VERSION
        self.headers: Dict[str, str] = {}
        self.content: str = ''


    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.as_dict())


    def set_version(self, version: Version):
        self.version = Version(version)
        return self


    def add_header(self, key: str, value: str):
        """ Set a single header; an existing header with the same *key* is
            replaced. Neither the key nor the value is normalized.
        """

        self.headers[key] = value
        return self


    def set_content(self, content: str):
        """ Replace the payload. The content is never parsed or re-encoded,
            even if it is itself JSON; it is carried as a string.
        """

        self.content = content
        return self


    def as_dict(self) -> Dict[str, Any]:
        """ Return a snapshot of the current fields as a plain dictionary,
            with enumeration members replaced by their literal wire tags.
            The headers are copied, so changes to the snapshot do not
            affect this builder.
        """

        snapshot = dict()

        for key in self.field_order:
            value = getattr(self, key)

            if isinstance(value, enum.Enum):
                value = value.value
            elif key == fields.HEADERS:
                value = dict(value)

            snapshot[key] = value

        return snapshot


    def build(self) -> str:
        """ Render the current state of this builder as JSON text. Nothing
            is cached; calling this method again after further changes will
            reflect those changes, and calling it twice with no intervening
            change returns identical text.
        """

        snapshot = self.as_dict()

        try:
            encoded = json.dumps(snapshot)
        except json.EncodeError as e:
            logger.warning('cannot encode %s: %s', self.__class__.__name__, e)
            raise SerializationError('cannot encode message: ' + str(e)) from e

        logger.debug('built %s, %d bytes', self.__class__.__name__, len(encoded))
        return encoded.decode('utf-8')


# end of class Builder



class RequestBuilder(Builder):
    """ Accumulate the fields of an ADTP request. In addition to the common
        fields, a request carries an operation *method* and a target *uri*.
        A new instance is immediately serializable: the method defaults to
        :attr:`Method.CHECK` and the uri to the empty string.
    """

    field_order = fields.REQUEST_FIELDS

    def __init__(self):

        Builder.__init__(self)

        self.method: Method = fields.DEFAULT_METHOD
        self.uri: str = ''


    def set_method(self, method: Method):
        self.method = Method(method)
        return self


    def set_uri(self, uri: str):
        """ Replace the resource identifier; the uri is accepted verbatim,
            with no check on its format.
        """

        self.uri = uri
        return self


# end of class RequestBuilder



class ResponseBuilder(Builder):
    """ Accumulate the fields of an ADTP response. In addition to the common
        fields, a response carries a result *status*, which defaults to
        :attr:`Status.OK`.
    """

    field_order = fields.RESPONSE_FIELDS

    def __init__(self):

        Builder.__init__(self)

        self.status: Status = fields.DEFAULT_STATUS


    def set_status(self, status: Status):
        self.status = Status(status)
        return self


# end of class ResponseBuilder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
