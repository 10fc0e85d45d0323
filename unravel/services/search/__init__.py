"""Multi-layer search on top of the dispatch engine."""

from unravel.services.search.layered import LayeredSearch, SearchResult

__all__ = [
    "LayeredSearch",
    "SearchResult",
]
