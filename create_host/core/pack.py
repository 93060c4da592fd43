# create_host/core/pack.py
"""
Big-endian packing of OI command arguments.

The Open Interface expects multi-byte arguments most-significant byte first,
e.g. DRIVE (137) takes velocity(i16) then radius(i16):

    from create_host.core.pack import pack

    args = pack([np.int16(-200), np.int16(500)])   # b"\\xff\\x38\\x01\\xf4"
    transport.write(137, args)

Every value must carry its own width. numpy scalars (np.uint8, np.int16,
np.uint32, np.float32, np.bool_, ...), numpy arrays of those dtypes and raw
bytes/bytearray (uint8 runs) are accepted. Plain Python ints and floats are
rejected because their width on the wire would be a guess.
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from .errors import EncodingError

# bool, signed int, unsigned int, float, complex
_FIXED_WIDTH_KINDS = "biufc"


def _encode_one(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)

    if isinstance(value, (np.generic, np.ndarray)):
        dtype = value.dtype
        if dtype.kind not in _FIXED_WIDTH_KINDS:
            raise EncodingError(
                f"cannot pack value {value!r}: dtype {dtype} has no fixed numeric width"
            )
        big = np.asarray(value).astype(dtype.newbyteorder(">"), copy=False)
        return big.tobytes()

    raise EncodingError(
        f"cannot pack value {value!r} of type {type(value).__name__}: "
        "use a fixed-width numpy type such as np.uint8 or np.int16"
    )


def pack(values: Iterable[Any]) -> bytes:
    """
    Serialize each value big-endian and concatenate in input order.

    Raises EncodingError on the first value without a fixed width; nothing
    is returned for a partially valid sequence.
    """
    parts = [_encode_one(v) for v in values]
    return b"".join(parts)
