''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps`.
'''

# The business about conditionally importing the libraries is intended to
# avoid importing less efficient libraries if they are not available. The
# KERNELWIRE_JSON environment variable can pin a specific backend.

from . import config

msgspec = None
orjson = None
json = None

backend = config.json_backend()

if backend in (None, 'msgspec'):
    try:
        import msgspec
    except ImportError:
        if backend == 'msgspec':
            raise

if msgspec is None and backend in (None, 'orjson'):
    try:
        import orjson
    except ImportError:
        if backend == 'orjson':
            raise

if msgspec is None and orjson is None:
    import json


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. To
# maintain alignment all 'dumps' methods need to do so as well.

def json_dumps(*args, **kwargs):
    return json.dumps(*args, **kwargs).encode()


# orjson rejects non-string dictionary keys unless asked; the other backends
# accept them and write them as strings. orjson integers are limited to
# 64 bits.

def orjson_dumps(value):
    return orjson.dumps(value, option=orjson.OPT_NON_STR_KEYS)


# Each backend has its own opinion about what exception to raise. These
# tuples collect them so callers can catch serialization failures without
# catching everything. RecursionError covers cyclic values on encode, and
# deeply nested input on decode, for backends that do not report either as
# their own error type.

encode_errors = (TypeError, ValueError, OverflowError, RecursionError)
decode_errors = (ValueError, RecursionError)

if msgspec is not None:
    name = 'msgspec'
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    encode_errors = encode_errors + (msgspec.EncodeError,)
    decode_errors = decode_errors + (msgspec.DecodeError,)
elif orjson is not None:
    name = 'orjson'
    dumps = orjson_dumps
    loads = orjson.loads
    encode_errors = encode_errors + (orjson.JSONEncodeError,)
    decode_errors = decode_errors + (orjson.JSONDecodeError,)
else:
    name = 'json'
    dumps = json_dumps
    loads = json.loads

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
