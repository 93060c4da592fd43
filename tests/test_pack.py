import numpy as np
import pytest

from create_host.core.errors import EncodingError
from create_host.core.pack import pack


def test_pack_uint8():
    assert pack([np.uint8(0x02)]) == b"\x02"


def test_pack_uint16_is_big_endian():
    assert pack([np.uint16(0x0102)]) == b"\x01\x02"


def test_pack_mixed_widths_in_order():
    out = pack([
        np.uint8(0xAA),
        np.int16(-200),
        np.uint32(0x01020304),
        np.int64(-1),
    ])
    assert len(out) == 1 + 2 + 4 + 8
    assert out[0:1] == b"\xaa"
    assert out[1:3] == b"\xff\x38"
    assert out[3:7] == b"\x01\x02\x03\x04"
    assert out[7:] == b"\xff" * 8


def test_pack_drive_arguments():
    # DRIVE: velocity -200 mm/s, radius 500 mm
    assert pack([np.int16(-200), np.int16(500)]) == bytes([0xFF, 0x38, 0x01, 0xF4])


def test_pack_empty():
    assert pack([]) == b""


def test_pack_bytes_and_arrays_pass_through():
    notes = np.array([60, 32, 62, 32], dtype=np.uint8)
    assert pack([b"\x01\x02", notes]) == b"\x01\x02" + bytes([60, 32, 62, 32])


def test_pack_little_endian_array_is_swapped():
    arr = np.array([0x0102, 0x0304], dtype="<u2")
    assert pack([arr]) == b"\x01\x02\x03\x04"


def test_pack_bool_and_float():
    assert pack([np.bool_(True)]) == b"\x01"
    assert pack([np.float32(1.0)]) == b"\x3f\x80\x00\x00"


@pytest.mark.parametrize("bad", [1, 1.5, True, "a", None, object()])
def test_pack_rejects_values_without_fixed_width(bad):
    with pytest.raises(EncodingError):
        pack([bad])


def test_pack_rejects_non_numeric_arrays():
    with pytest.raises(EncodingError):
        pack([np.array(["x"])])


def test_pack_error_returns_nothing_partial():
    with pytest.raises(EncodingError) as ei:
        pack([np.uint8(1), 2, np.uint8(3)])
    assert "int" in str(ei.value)


def test_encoding_error_is_type_error():
    with pytest.raises(TypeError):
        pack([3])
