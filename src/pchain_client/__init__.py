__version__ = "0.4.3"

__all__ = [
    # Codec
    "encode",
    "encode_arguments",
    "decode_flat",
    "decode_schema",
    "normalize_type",
    "parse_type",
    # Codec errors
    "CodecError",
    "EncodeError",
    "DecodeError",
    "UnsupportedTypeError",
    # Config
    "ConfigError",
    "load_url",
    "save_url",
]

from .codec import (
    CodecError,
    DecodeError,
    EncodeError,
    UnsupportedTypeError,
    decode_flat,
    decode_schema,
    encode,
    encode_arguments,
    normalize_type,
    parse_type,
)
from .config import ConfigError, load_url, save_url
