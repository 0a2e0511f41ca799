"""
Page/limit pagination metadata.
"""
import math
from typing import Any, Dict

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5
MAX_LIMIT = 100


def pagination_metadata(total_records: int, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Dict[str, Any]:
    """
    Build {totalRecords, firstPage, lastPage, page, limit} for a list query.
    lastPage is never below 1, even when there are no records.
    """
    last_page = max(1, math.ceil(total_records / limit))
    return {
        "totalRecords": total_records,
        "firstPage": 1,
        "lastPage": last_page,
        "page": page,
        "limit": limit,
    }
