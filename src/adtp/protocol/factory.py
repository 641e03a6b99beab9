"""Convenience constructors for protocol messages."""

from __future__ import annotations

from typing import Mapping, Optional

from . import fields
from .builder import RequestBuilder, ResponseBuilder
from .fields import Method, Status, Version


def request(method: Method = fields.DEFAULT_METHOD, uri: str = '', content: str = '', headers: Optional[Mapping[str, str]] = None, version: Version = fields.DEFAULT_VERSION) -> RequestBuilder:
    builder = RequestBuilder().set_version(version).set_method(method).set_uri(uri).set_content(content)
    _add_headers(builder, headers)
    return builder


def response(status: Status = fields.DEFAULT_STATUS, content: str = '', headers: Optional[Mapping[str, str]] = None, version: Version = fields.DEFAULT_VERSION) -> ResponseBuilder:
    builder = ResponseBuilder().set_version(version).set_status(status).set_content(content)
    _add_headers(builder, headers)
    return builder


def _add_headers(builder, headers):

    if headers is None:
        return

    for key,value in headers.items():
        builder.add_header(key, value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
