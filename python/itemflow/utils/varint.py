"""
Integer encodings of the writable wire format.
    -> Fixed-width int: 4 bytes, big-endian, signed.
    -> Zero-compressed variable-length int (vint):
        -> A value in [-112, 127] is stored as a single byte.
        -> Otherwise the first byte is a marker:
            -113 .. -116 : positive value followed by 1 .. 4 magnitude bytes
            -121 .. -124 : negative value followed by 1 .. 4 magnitude bytes
           The magnitude bytes are big-endian; a negative value is stored one's-complemented.

>> import io
>> stream = io.BytesIO()
>> write_vint(stream, 300)
>> stream.getvalue()
b'\\x8e\\x01,'
"""
import logging
import struct
from typing import BinaryIO

from itemflow.exceptions import DecodeError

__all__ = [
    "write_int", "read_int", "write_vint", "read_vint", "read_exactly"
]

logger = logging.getLogger(__name__)

INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
_INT32 = struct.Struct(">i")


def _check_int32(value: int):
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError("The value {0} doesn't fit in a signed 32-bit int.".format(value))


def read_exactly(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        got = 0 if data is None else len(data)
        logger.debug("Short read: wanted %d bytes, got %d.", size, got)
        raise DecodeError("Unexpected end of input: wanted {0} bytes, got {1}.".format(size, got))
    return data


def write_int(stream: BinaryIO, value: int):
    _check_int32(value)
    stream.write(_INT32.pack(value))


def read_int(stream: BinaryIO) -> int:
    return _INT32.unpack(read_exactly(stream, 4))[0]


def write_vint(stream: BinaryIO, value: int):
    _check_int32(value)
    if -112 <= value <= 127:
        stream.write(struct.pack(">b", value))
        return

    marker = -112
    if value < 0:
        value = ~value
        marker = -120
    n_bytes = (value.bit_length() + 7) // 8
    stream.write(struct.pack(">b", marker - n_bytes))
    stream.write(value.to_bytes(n_bytes, "big"))


def _is_negative_marker(first_byte: int) -> bool:
    return first_byte < -120 or -112 <= first_byte < 0


def _decode_vint_size(first_byte: int) -> int:
    if first_byte >= -112:
        return 1
    elif first_byte < -120:
        return -119 - first_byte
    return -111 - first_byte


def read_vint(stream: BinaryIO) -> int:
    first_byte = struct.unpack(">b", read_exactly(stream, 1))[0]
    size = _decode_vint_size(first_byte)
    if size == 1:
        return first_byte

    value = int.from_bytes(read_exactly(stream, size - 1), "big")
    if _is_negative_marker(first_byte):
        value = ~value
    if not INT32_MIN <= value <= INT32_MAX:
        logger.debug("Vint value %d overflows a 32-bit int.", value)
        raise DecodeError("The value {0} is too long to fit in an integer.".format(value))
    return value
