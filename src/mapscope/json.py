''' Wrapper module to select the most performant available library to handle
    the equivalent of :func:`json.loads` and :func:`json.dumps` for the
    protocol message wire form and the mapping context files.
'''

# msgspec is an optional extra; orjson is always installed alongside
# mapscope. Whichever is found first is used for every encode/decode.

msgspec = None
orjson = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    import orjson


# The msgspec 'encode' operation returns bytes, as does orjson.dumps. Both
# decoders accept either bytes or str.

if msgspec is not None:
    backend = 'msgspec'
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder()
    dumps = encoder.encode
    loads = decoder.decode
    DecodeError = msgspec.DecodeError
    EncodeError = msgspec.EncodeError
else:
    backend = 'orjson'
    dumps = orjson.dumps
    loads = orjson.loads
    DecodeError = orjson.JSONDecodeError
    EncodeError = orjson.JSONEncodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
