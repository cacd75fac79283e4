from .book_mapper import BookMapper
from .tag_mapper import TagMapper

__all__ = [
    "BookMapper",
    "TagMapper",
]
