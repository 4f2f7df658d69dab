"""
Root ``Query`` and ``Mutation`` types and the executable schema.

Query fields never fail: an unknown id resolves to ``null``.
Mutation fields that target an existing entity raise ``NotFoundError``
when the id is unknown.  Mutation results are nullable so that the
error nulls only the failing field; sibling root fields in the same
document still run and resolve.
"""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from ..core.errors import NotFoundError
from ..schemas.author import AuthorCreate, AuthorUpdate
from ..schemas.book import BookCreate, BookUpdate
from .context import author_service, book_service
from .types import Author, Book


def _provided(**fields) -> dict:
    """Keep only the optional arguments present in the request."""
    return {name: value for name, value in fields.items() if value is not strawberry.UNSET}


@strawberry.type(description="Root Query")
class Query:
    @strawberry.field(description="List of All Books")
    def books(self, info: Info) -> List[Book]:
        return [Book.from_read(book) for book in book_service(info).list_books()]

    @strawberry.field(description="List of All Authors")
    def authors(self, info: Info) -> List[Author]:
        return [Author.from_read(author) for author in author_service(info).list_authors()]

    @strawberry.field(description="Get a book by ID")
    def book(self, info: Info, id: Optional[int] = strawberry.UNSET) -> Optional[Book]:
        if id is strawberry.UNSET or id is None:
            return None
        book = book_service(info).get_book(id)
        return Book.from_read(book) if book is not None else None

    @strawberry.field(description="Get an author by ID")
    def author(self, info: Info, id: Optional[int] = strawberry.UNSET) -> Optional[Author]:
        if id is strawberry.UNSET or id is None:
            return None
        author = author_service(info).get_author(id)
        return Author.from_read(author) if author is not None else None


@strawberry.type(description="Root Mutation")
class Mutation:
    @strawberry.mutation(description="Add a book")
    def add_book(self, info: Info, name: str, author_id: int) -> Optional[Book]:
        book = book_service(info).create_book(BookCreate(name=name, author_id=author_id))
        return Book.from_read(book)

    @strawberry.mutation(description="Update a book")
    def update_book(
        self,
        info: Info,
        id: int,
        name: Optional[str] = strawberry.UNSET,
        author_id: Optional[int] = strawberry.UNSET,
    ) -> Optional[Book]:
        data = BookUpdate(**_provided(name=name, author_id=author_id))
        book = book_service(info).update_book(id, data)
        if book is None:
            raise NotFoundError("Book", id)
        return Book.from_read(book)

    @strawberry.mutation(description="Delete a book")
    def delete_book(self, info: Info, id: int) -> Optional[Book]:
        book = book_service(info).delete_book(id)
        if book is None:
            raise NotFoundError("Book", id)
        return Book.from_read(book)

    @strawberry.mutation(description="Add an author")
    def add_author(self, info: Info, name: str) -> Optional[Author]:
        author = author_service(info).create_author(AuthorCreate(name=name))
        return Author.from_read(author)

    @strawberry.mutation(description="Update an author")
    def update_author(
        self, info: Info, id: int, name: Optional[str] = strawberry.UNSET
    ) -> Optional[Author]:
        author = author_service(info).update_author(id, AuthorUpdate(**_provided(name=name)))
        if author is None:
            raise NotFoundError("Author", id)
        return Author.from_read(author)

    @strawberry.mutation(description="Delete an author")
    def delete_author(self, info: Info, id: int) -> Optional[Author]:
        # Books of the deleted author are left as they are.
        author = author_service(info).delete_author(id)
        if author is None:
            raise NotFoundError("Author", id)
        return Author.from_read(author)


schema = strawberry.Schema(query=Query, mutation=Mutation)
