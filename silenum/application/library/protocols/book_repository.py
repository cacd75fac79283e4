from typing import Protocol

from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.entities.book import Book


class BookRepositoryProtocol(Protocol):
    def find_by_id(self, book_id: BookId, user_id: UserId) -> Book | None: ...

    def find_by_user(self, user_id: UserId) -> set[Book]: ...

    def save(self, book: Book) -> Book | None: ...

    def delete(self, book: Book) -> None: ...
