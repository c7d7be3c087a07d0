"""
Hash Functions
    Process-independent hashing for item labels and label sequences.
    -> Python salts str hashes per process (PYTHONHASHSEED), so two Spark workers
       would route the same key to different partitions.
    -> These functions follow the JVM recurrences instead:
        String.hashCode:  h = 31 * h + code_unit   (UTF-16 code units)
        Arrays.hashCode:  h = 31 * h + hash(element), starting at 1
       Both wrap to signed 32 bits.
"""
from typing import Iterable

__all__ = [
    "str2int", "hash_sequence"
]

INT32_MASK = 0xFFFFFFFF
INT32_MAX = 0x7FFFFFFF


def to_int32(value: int) -> int:
    value &= INT32_MASK
    return value - (1 << 32) if value > INT32_MAX else value


def str2int(obj: str, seed: int=0) -> int:
    """
    :param obj: str
    :param seed: int, the initial hash value. The JVM starts from 0.
    :return: signed 32-bit int
    """
    encoded = obj.encode("utf-16-be", "surrogatepass")
    for idx in range(0, len(encoded), 2):
        seed = (seed * 31 + ((encoded[idx] << 8) | encoded[idx + 1])) & INT32_MASK
    return to_int32(seed)


def hash_sequence(labels: Iterable[str]) -> int:
    """
    Positional hash of a sequence of strings.
    :param labels: Iterable<str>
    :return: signed 32-bit int
    """
    seed = 1
    for label in labels:
        seed = (seed * 31 + str2int(label)) & INT32_MASK
    return to_int32(seed)

