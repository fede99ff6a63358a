"""Query option and paging models for odatasql."""

from odatasql.models.options import QueryOptions
from odatasql.models.paging import FeedOptions

__all__ = [
    "FeedOptions",
    "QueryOptions",
]
