from .create_book_use_case import CreateBookUseCase
from .delete_book_use_case import DeleteBookUseCase
from .get_book_details_use_case import GetBookDetailsUseCase
from .replace_book_tags_use_case import ReplaceBookTagsUseCase

__all__ = [
    "CreateBookUseCase",
    "DeleteBookUseCase",
    "GetBookDetailsUseCase",
    "ReplaceBookTagsUseCase",
]
