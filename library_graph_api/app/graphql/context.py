"""Helpers for reading the per‑request GraphQL context."""

from strawberry.types import Info

from ..core.store import LibraryStore
from ..services.author_service import AuthorService
from ..services.book_service import BookService


def get_store(info: Info) -> LibraryStore:
    return info.context["store"]


def book_service(info: Info) -> BookService:
    return BookService(get_store(info))


def author_service(info: Info) -> AuthorService:
    return AuthorService(get_store(info))
