"""
Search query construction for the application registry.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

QueryPairs = List[Tuple[str, str]]


@dataclass(frozen=True)
class SearchCriteria:
    """Optional filters accepted by the search route.

    ``None`` means the filter was not supplied. Any string, including the
    empty string, counts as supplied and is forwarded untouched.
    """

    app_name: Optional[str] = None
    app_owner: Optional[str] = None
    is_valid: Optional[bool] = None


def _render_bool(value: bool) -> str:
    return "true" if value else "false"


def build_search_query(criteria: SearchCriteria) -> QueryPairs:
    """Return the outbound query pairs in ``appName, appOwner, isValid`` order.

    Filters that are absent are left out entirely.
    """
    pairs: QueryPairs = []

    if criteria.app_name is not None:
        pairs.append(("appName", criteria.app_name))

    if criteria.app_owner is not None:
        pairs.append(("appOwner", criteria.app_owner))

    if criteria.is_valid is not None:
        pairs.append(("isValid", _render_bool(criteria.is_valid)))

    return pairs
