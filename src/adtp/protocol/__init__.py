"""
ADTP Protocol Layer
===================

This package defines the message-construction side of the ADTP protocol.
It provides the enumerations used on the wire, the request and response
builders, and a handful of convenience constructors.

The protocol layer MUST NOT depend on any transport implementation; the
serialized text is handed to whatever channel the caller manages.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Convenience Constructors (factory.py)
    One-call creation of a preloaded builder
    - request()
    - response()

    │
    ▼
Message Builders (builder.py)
    Fluent accumulation of one outbound message
    - RequestBuilder
    - ResponseBuilder
    Terminates in build(), which renders JSON text

    │
    ▼
Field Vocabulary (fields.py)
    Canonical field names and wire enumerations
    - Version
    - Method
    - Status
    Prevents string drift across system

---------------------------------------------------------------------

Wire Format
-----------

Request:
    {"version": ..., "method": ..., "headers": {...}, "uri": ..., "content": ...}

Response:
    {"version": ..., "status": ..., "headers": {...}, "content": ...}

Enumeration members are always rendered as their literal tags, for
example "ADTP/2.0", "check", or "not-found".

---------------------------------------------------------------------
"""

from . import fields
from . import builder
from . import factory

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
