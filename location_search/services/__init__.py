"""Services layer - Search orchestration.

Available services:
- LocationSearchService: Public search / popular / nearby / lookup API
- QueryMatcher: Scores a record against a query
- Ranker: Orders scored candidates
"""

from .location_search import LocationSearchService
from .matcher import QueryMatcher
from .ranker import Ranker

__all__ = ["LocationSearchService", "QueryMatcher", "Ranker"]
