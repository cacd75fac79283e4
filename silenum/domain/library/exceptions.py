"""Library module domain exceptions."""

from silenum.domain.common.exceptions import EntityNotFoundError


class BookNotFoundError(EntityNotFoundError):
    """Raised when a book cannot be found."""

    def __init__(self, book_id: int) -> None:
        super().__init__("Book", book_id)
