"""
GraphQL object types for books and authors.

``Book.author`` and ``Author.books`` are relationship fields: they are
not stored on the object but resolved from the store each time a
query selects them.  Nothing is cached between resolutions, so a
mutation earlier in the same document is visible to later selections.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from ..schemas.author import AuthorRead
from ..schemas.book import BookRead
from .context import author_service, book_service


@strawberry.type(description="This represents a book written by an author")
class Book:
    id: int
    name: str
    author_id: int

    @strawberry.field
    def author(self, info: Info) -> Optional["Author"]:
        # A dangling author_id resolves to null rather than an error.
        author = author_service(info).get_author(self.author_id)
        return Author.from_read(author) if author is not None else None

    @classmethod
    def from_read(cls, book: BookRead) -> "Book":
        return cls(id=book.id, name=book.name, author_id=book.author_id)


@strawberry.type(description="This represents an author of a book")
class Author:
    id: int
    name: str

    @strawberry.field
    def books(self, info: Info) -> List[Book]:
        return [Book.from_read(book) for book in book_service(info).list_books_by_author(self.id)]

    @classmethod
    def from_read(cls, author: AuthorRead) -> "Author":
        return cls(id=author.id, name=author.name)
