from .hash import str2int, hash_sequence
from .varint import write_int, read_int, write_vint, read_vint

__all__ = [
    "str2int", "hash_sequence",
    "write_int", "read_int", "write_vint", "read_vint"
]
