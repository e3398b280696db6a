"""
Domain helpers for the Gateway Service.

Pure request-shaping and response-shaping logic with no I/O: search query
construction, backend call outcomes and the fallback payload.
"""

from .query_builder import QueryPairs, SearchCriteria, build_search_query
from .results import BackendCallResult, BackendFailure, BackendSuccess
from .fallback import ErrorPayload, encode_fallback

__all__ = [
    "QueryPairs",
    "SearchCriteria",
    "build_search_query",
    "BackendCallResult",
    "BackendFailure",
    "BackendSuccess",
    "ErrorPayload",
    "encode_fallback",
]
