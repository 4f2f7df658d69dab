"""
Business logic for books.

``BookService`` reads and writes the book collection of the store it
was constructed with.  Creating a book never fails: the author id is
stored as given, even if no author has that id.  Update and delete
return ``None`` for an unknown id instead of raising, leaving the
caller to decide how to report it.
"""

import logging
from typing import List, Optional

from ..core.store import BookRecord, LibraryStore
from ..schemas.book import BookCreate, BookRead, BookUpdate

logger = logging.getLogger(__name__)


class BookService:
    """Service for querying and mutating books."""

    def __init__(self, store: LibraryStore) -> None:
        self.store = store

    def list_books(self) -> List[BookRead]:
        """Return all books in store order."""
        with self.store.lock:
            books = self.store.books.all()
        return [BookRead.model_validate(book) for book in books]

    def list_books_by_author(self, author_id: int) -> List[BookRead]:
        """Return the books whose ``author_id`` matches, in store order.

        An author without books (or an unknown author id) yields an
        empty list.
        """
        with self.store.lock:
            books = self.store.books.filter(lambda book: book.author_id == author_id)
        return [BookRead.model_validate(book) for book in books]

    def get_book(self, book_id: int) -> Optional[BookRead]:
        with self.store.lock:
            book = self.store.books.find_by_id(book_id)
            if book is None:
                return None
            return BookRead.model_validate(book)

    def create_book(self, data: BookCreate) -> BookRead:
        """Append a new book with a freshly allocated id and return it."""
        books = self.store.books
        with self.store.lock:
            book = books.append(
                BookRecord(id=books.allocate_id(), name=data.name, author_id=data.author_id)
            )
        logger.info("Created book %s '%s' (author %s)", book.id, book.name, book.author_id)
        return BookRead.model_validate(book)

    def update_book(self, book_id: int, data: BookUpdate) -> Optional[BookRead]:
        """Overwrite the provided fields of a book.

        Fields left unset (or set to ``None``) in ``data`` keep their
        current value.  Returns the updated book or ``None`` if no book
        has ``book_id``.
        """
        with self.store.lock:
            book = self.store.books.find_by_id(book_id)
            if book is None:
                logger.info("Book %s not found for update", book_id)
                return None
            changes = data.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in changes.items():
                setattr(book, field, value)
            result = BookRead.model_validate(book)
        logger.info("Updated book %s: %s", book_id, changes)
        return result

    def delete_book(self, book_id: int) -> Optional[BookRead]:
        """Remove a book and return it as it was before removal."""
        with self.store.lock:
            index = self.store.books.find_index_by_id(book_id)
            if index is None:
                logger.info("Book %s not found for deletion", book_id)
                return None
            book = self.store.books.remove_at(index)
        logger.info("Deleted book %s", book_id)
        return BookRead.model_validate(book)
