''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`.
'''

import importlib
import logging

logger = logging.getLogger(__name__)

# The business about conditionally importing the libraries is intended to
# avoid importing less efficient libraries if they are not available. The
# preferred order is msgspec, then orjson, then the standard library.

preference = ('msgspec', 'orjson', 'json')

backend = None
dumps = None
loads = None

# Exception classes the active backend raises when a value cannot be
# encoded; updated by use().

EncodeError = ()


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. To
# maintain alignment all 'dumps' methods need to do so as well. The
# standard library is told not to escape non-ASCII text so that the
# strict UTF-8 encode rejects unpaired surrogates, same as the others.

def _json_backend(module):

    def json_dumps(value):
        return module.dumps(value, ensure_ascii=False, separators=(',', ':')).encode('utf-8')

    return json_dumps, module.loads, (TypeError, ValueError)


def _msgspec_backend(module):
    encoder = module.json.Encoder()
    decoder = module.json.Decoder()
    errors = (module.EncodeError, TypeError, ValueError)
    return encoder.encode, decoder.decode, errors


def _orjson_backend(module):
    return module.dumps, module.loads, (module.JSONEncodeError, ValueError)


_backends = {
    'msgspec': _msgspec_backend,
    'orjson': _orjson_backend,
    'json': _json_backend,
}


def use(name):
    """ Switch the active backend to the library identified by *name*, one
        of 'msgspec', 'orjson', or 'json'. An ImportError is raised if the
        requested library is not installed; the previously active backend
        remains in place in that case.
    """

    global backend, dumps, loads, EncodeError

    try:
        setup = _backends[name]
    except KeyError:
        raise ValueError('unknown JSON backend: ' + repr(name))

    module = importlib.import_module(name)
    dumps, loads, EncodeError = setup(module)
    backend = name

    logger.debug('JSON backend: %s', name)


def available():
    """ Return a tuple of the backend names that can be imported, in order
        of preference.
    """

    found = list()

    for name in preference:
        try:
            importlib.import_module(name)
        except ImportError:
            continue
        found.append(name)

    return tuple(found)


use(available()[0])

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
