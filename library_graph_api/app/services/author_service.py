"""
Business logic for authors.

Deleting an author does not touch the book collection: books written
by a deleted author stay in place and their ``author`` field resolves
to nothing from then on.
"""

import logging
from typing import List, Optional

from ..core.store import AuthorRecord, LibraryStore
from ..schemas.author import AuthorCreate, AuthorRead, AuthorUpdate

logger = logging.getLogger(__name__)


class AuthorService:
    """Service for querying and mutating authors."""

    def __init__(self, store: LibraryStore) -> None:
        self.store = store

    def list_authors(self) -> List[AuthorRead]:
        with self.store.lock:
            authors = self.store.authors.all()
        return [AuthorRead.model_validate(author) for author in authors]

    def get_author(self, author_id: int) -> Optional[AuthorRead]:
        with self.store.lock:
            author = self.store.authors.find_by_id(author_id)
            if author is None:
                return None
            return AuthorRead.model_validate(author)

    def create_author(self, data: AuthorCreate) -> AuthorRead:
        authors = self.store.authors
        with self.store.lock:
            author = authors.append(AuthorRecord(id=authors.allocate_id(), name=data.name))
        logger.info("Created author %s '%s'", author.id, author.name)
        return AuthorRead.model_validate(author)

    def update_author(self, author_id: int, data: AuthorUpdate) -> Optional[AuthorRead]:
        """Overwrite the provided fields of an author.

        Fields left unset (or set to ``None``) in ``data`` keep their
        current value.  Returns the author (changed or not) or ``None``
        if the id is unknown.
        """
        with self.store.lock:
            author = self.store.authors.find_by_id(author_id)
            if author is None:
                logger.info("Author %s not found for update", author_id)
                return None
            changes = data.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in changes.items():
                setattr(author, field, value)
            result = AuthorRead.model_validate(author)
        logger.info("Updated author %s: %s", author_id, changes)
        return result

    def delete_author(self, author_id: int) -> Optional[AuthorRead]:
        with self.store.lock:
            index = self.store.authors.find_index_by_id(author_id)
            if index is None:
                logger.info("Author %s not found for deletion", author_id)
                return None
            author = self.store.authors.remove_at(index)
        logger.info("Deleted author %s", author_id)
        return AuthorRead.model_validate(author)
