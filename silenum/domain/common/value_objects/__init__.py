from .ids import BookId, TagId, UserId

__all__ = [
    "BookId",
    "TagId",
    "UserId",
]
