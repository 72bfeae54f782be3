from collections.abc import Sequence
from typing import NamedTuple


class Pair(NamedTuple):
    """
    One key and value of a tag document.

    >>> key, value = Pair("name", "value")
    >>> key
    'name'
    """

    key: str
    value: str


class Document(Sequence):
    """
    The pairs of a tag document in the order they appear in the file.
    Keys may repeat, so this is an append-only sequence rather than a
    dictionary.

    >>> doc = Document([("a", "1"), ("b", "2"), ("a", "3")])
    >>> doc.get_all("a")
    ['1', '3']
    >>> doc[1]
    Pair(key='b', value='2')

    """

    def __init__(self, pairs=()):
        self._pairs = [Pair(*p) for p in pairs]

    def append(self, pair):
        self._pairs.append(Pair(*pair))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Document(self._pairs[index])
        return self._pairs[index]

    def __len__(self):
        return len(self._pairs)

    def __eq__(self, other):
        if isinstance(other, Document):
            return self._pairs == other._pairs
        if isinstance(other, (list, tuple)):
            return self._pairs == list(other)
        return NotImplemented

    __hash__ = None

    def keys(self):
        """
        :returns: List of keys in order, including duplicates.
        """
        return [p.key for p in self._pairs]

    def get_all(self, key):
        """
        :returns: All values given for key, in order.
        """
        return [p.value for p in self._pairs if p.key == key]

    def __repr__(self):
        return f"Document({self._pairs!r})"
