"""
In‑memory entity store for authors and books.

The store owns two ordered collections.  Each collection keeps its
records in insertion order and hands out ids from its own monotonic
counter, so an id is never issued twice even after deletions.  There
is no persistence: a store lives as long as the process (or the test)
that created it.

A single ``LibraryStore`` is built by ``create_app`` and passed to the
services through the GraphQL context; nothing in this package keeps
module‑level collections.  Services hold ``store.lock`` around every
read‑modify‑write so that find‑then‑remove sequences stay atomic if
the server ever runs requests concurrently.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Protocol, TypeVar


@dataclass
class AuthorRecord:
    id: int
    name: str


@dataclass
class BookRecord:
    id: int
    name: str
    author_id: int


class _HasId(Protocol):
    id: int


T = TypeVar("T", bound=_HasId)


SAMPLE_AUTHORS = [
    (1, "J. K. Rowling"),
    (2, "J. R. R. Tolkien"),
    (3, "Brent Weeks"),
]

SAMPLE_BOOKS = [
    (1, "Harry Potter and the Chamber of Secrets", 1),
    (2, "Harry Potter and the Prisoner of Azkaban", 1),
    (3, "Harry Potter and the Goblet of Fire", 1),
    (4, "The Fellowship of the Ring", 2),
    (5, "The Two Towers", 2),
    (6, "The Return of the King", 2),
    (7, "The Way of Shadows", 3),
    (8, "Beyond the Shadows", 3),
]


class Collection(Generic[T]):
    """Ordered list of records with id lookup and a monotonic id counter."""

    def __init__(self, records: Iterable[T] = ()) -> None:
        self._records: List[T] = []
        self._last_id = 0
        for record in records:
            self.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def allocate_id(self) -> int:
        """Reserve and return the next id.  Ids are never handed out twice."""
        self._last_id += 1
        return self._last_id

    def find_by_id(self, record_id: int) -> Optional[T]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def find_index_by_id(self, record_id: int) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def append(self, record: T) -> T:
        """Add ``record`` at the end of the collection and return it.

        Records appended with an explicit id (sample data, for
        instance) move the counter forward so that later
        ``allocate_id`` calls cannot collide with them.
        """
        self._records.append(record)
        self._last_id = max(self._last_id, record.id)
        return record

    def remove_at(self, index: int) -> T:
        return self._records.pop(index)

    def all(self) -> List[T]:
        """Return a snapshot of the records in store order."""
        return list(self._records)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return [record for record in self._records if predicate(record)]


class LibraryStore:
    """Holds the author and book collections of one running application."""

    def __init__(
        self,
        authors: Iterable[AuthorRecord] = (),
        books: Iterable[BookRecord] = (),
    ) -> None:
        self.authors: Collection[AuthorRecord] = Collection(authors)
        self.books: Collection[BookRecord] = Collection(books)
        self.lock = threading.RLock()

    @classmethod
    def with_sample_data(cls) -> "LibraryStore":
        """Build a store seeded with three authors and eight books."""
        return cls(
            authors=[AuthorRecord(id=i, name=name) for i, name in SAMPLE_AUTHORS],
            books=[
                BookRecord(id=i, name=name, author_id=author_id)
                for i, name, author_id in SAMPLE_BOOKS
            ],
        )
