"""
Item Set
    Is the record exchanged between the stages of a frequent-pattern pipeline:
        -> An ordered sequence of textual items, kept in frequency order by the caller.
        -> The first item is the head, the remaining items are the tail.
    It plays two roles:
        -> An ordered key: equality, hashing, ordering and serialization follow the sequence.
        -> An unordered set: subsumes() ignores order and duplicates.

    Ordering compares the space-joined rendering, not the items one by one.
    Items containing spaces may therefore render alike while being unequal.
    The rendering is compared by code points. A JVM String compares UTF-16 code units
    instead, so items beyond U+FFFF sort after U+E000..U+FFFF here and before them there.

    Wire format (the writable array-of-text layout):
        int32 big-endian   count
        count times:       vint byte-length, UTF-8 bytes

    Instances are not thread-safe. A pipeline gives each instance to one worker at a time.

>> from itemflow import ItemSet
>> item_set = ItemSet("c", "a", "b")
>> item_set.extract_head()
'c'
>> item_set.subsumes(ItemSet("b"))
True
>> ItemSet.from_bytes(item_set.to_bytes()) == ItemSet("a", "b")
True
"""
import io
import logging
from typing import BinaryIO, Iterator, List

from itemflow.exceptions import EmptyCollectionError, DecodeError, InvalidArgumentError
from itemflow.utils.hash import hash_sequence
from itemflow.utils.varint import write_int, read_int, write_vint, read_vint, read_exactly

__all__ = [
    "ItemSet"
]

logger = logging.getLogger(__name__)


def _to_label(item) -> str:
    if isinstance(item, str):
        try:
            item.encode("utf-8")
        except UnicodeEncodeError as err:
            raise InvalidArgumentError("The item {0!r} cannot be encoded as UTF-8.".format(item)) from err
        return item
    elif isinstance(item, (bytes, bytearray)):
        try:
            return bytes(item).decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidArgumentError("The item {0!r} is not valid UTF-8 text.".format(item)) from err
    raise InvalidArgumentError("The item type {0} doesn't match the required types.".format(type(item)))


class ItemSet(object):
    __slots__ = ("_items",)

    def __init__(self, *items):
        """
        :param items: str/bytes
            ItemSet("a", "b") holds the items in the given order.
            ItemSet(other) with a single ItemSet argument copies its items.
        """
        if len(items) == 1 and isinstance(items[0], ItemSet):
            self._items = list(items[0]._items)
        else:
            self._items = [_to_label(item) for item in items]

    @classmethod
    def prepend(cls, head, tail: "ItemSet") -> "ItemSet":
        """
        Build [head] + tail. The tail is left untouched.
        """
        if not isinstance(tail, ItemSet):
            raise InvalidArgumentError("The tail must be an ItemSet, got {0}.".format(type(tail)))
        item_set = cls()
        item_set._items = [_to_label(head)] + tail._items
        return item_set

    def labels(self) -> List[str]:
        return list(self._items)

    def raw_labels(self) -> List[bytes]:
        return [item.encode("utf-8") for item in self._items]

    def __str__(self):
        return " ".join(self._items)

    def __repr__(self):
        return "ItemSet({0})".format(", ".join(repr(item) for item in self._items))

    def __len__(self):
        return len(self._items)

    def __contains__(self, item):
        return item in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, ItemSet):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def hash_code(self) -> int:
        """
        The signed 32-bit positional hash, identical on every process.
        """
        return hash_sequence(self._items)

    def __hash__(self):
        return self.hash_code()

    def compare_to(self, other: "ItemSet") -> int:
        """
        Sort item sets lexicographically by their rendering.
        :return: -1 if self precedes, 1 if other precedes, 0 if they render alike.
        """
        if not isinstance(other, ItemSet):
            raise InvalidArgumentError("Cannot compare an item set with {0}.".format(type(other)))
        this, that = str(self), str(other)
        return (this > that) - (this < that)

    def __lt__(self, other):
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self.compare_to(other) >= 0

    def sort(self):
        """
        Sort the items in place.
        """
        self._items.sort()

    def extract_head(self) -> str:
        """
        Remove the first item and return it, e.g. for {a b c} this returns "a"
        and leaves {b c}.
        """
        if not self._items:
            raise EmptyCollectionError("Cannot extract the head of an empty item set.")
        return self._items.pop(0)

    def subsumes(self, other: "ItemSet") -> bool:
        if not isinstance(other, ItemSet):
            raise InvalidArgumentError("Cannot test subsumption of {0}.".format(type(other)))
        # TODO: use the frequency order of both item sets to test containment in one merge pass.
        return set(self._items).issuperset(other._items)

    def write(self, stream: BinaryIO):
        raw_labels = self.raw_labels()
        write_int(stream, len(raw_labels))
        for raw in raw_labels:
            write_vint(stream, len(raw))
            stream.write(raw)

    @classmethod
    def read(cls, stream: BinaryIO) -> "ItemSet":
        """
        Read exactly one item set record from a binary stream.
        """
        count = read_int(stream)
        if count < 0:
            logger.debug("Rejecting item set record with count %d.", count)
            raise DecodeError("Negative item count {0}.".format(count))

        items = list()
        for _ in range(count):
            length = read_vint(stream)
            if length < 0:
                logger.debug("Rejecting item %d of %d with length %d.", len(items), count, length)
                raise DecodeError("Negative item length {0}.".format(length))
            raw = read_exactly(stream, length)
            try:
                items.append(raw.decode("utf-8"))
            except UnicodeDecodeError as err:
                logger.debug("Rejecting item %d of %d: invalid UTF-8.", len(items), count)
                raise DecodeError("The item {0!r} is not valid UTF-8 text.".format(raw)) from err

        item_set = cls()
        item_set._items = items
        return item_set

    def to_bytes(self) -> bytes:
        stream = io.BytesIO()
        self.write(stream)
        return stream.getvalue()

    @classmethod
    def from_bytes(cls, data) -> "ItemSet":
        stream = io.BytesIO(data)
        item_set = cls.read(stream)
        trailing = len(data) - stream.tell()
        if trailing:
            logger.debug("Rejecting item set record followed by %d bytes.", trailing)
            raise DecodeError("{0} trailing bytes after the item set record.".format(trailing))
        return item_set


if __name__ == '__main__':
    tail = ItemSet("b", "c")
    pattern = ItemSet.prepend("a", tail)
    print(pattern, tail, pattern.subsumes(tail), pattern.to_bytes())
    print(sorted([ItemSet("a", "c"), ItemSet("a", "b"), ItemSet("a")]))
