from __future__ import annotations


class CodecError(ValueError):
    exit_code: int = 1

    def __init__(self, message: str, subject: str = "") -> None:
        super().__init__(message)
        self.subject = subject


class UnsupportedTypeError(CodecError):
    exit_code = 2


class EncodeError(CodecError):
    pass


class DecodeError(CodecError):
    pass


class UnsupportedEncodeTypeError(EncodeError, UnsupportedTypeError):
    pass


class UnsupportedDecodeTypeError(DecodeError, UnsupportedTypeError):
    pass


class ArgumentFormatError(EncodeError):
    pass
