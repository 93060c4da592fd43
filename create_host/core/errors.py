# create_host/core/errors.py
from __future__ import annotations

from typing import Union


class OIError(Exception):
    pass


class ConfigurationError(OIError, ValueError):
    """Serial parameters rejected before any I/O (e.g. unsupported baud rate)."""


class EncodingError(OIError, TypeError):
    """A value could not be serialized to a fixed number of bytes."""


class WriteError(OIError, IOError):
    """
    The transport accepted fewer bytes than required or failed outright.
    `data` holds the bytes that did not make it out.
    """
    def __init__(self, message: str, data: Union[bytes, int]) -> None:
        super().__init__(message)
        self.data = bytes([data]) if isinstance(data, int) else bytes(data)


class OpcodeWriteError(WriteError):
    pass


class PayloadWriteError(WriteError):
    pass
