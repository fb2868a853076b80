"""
Continuation Token Pagination

Listing operations return one page plus an opaque ``nextToken``. The helper
here follows that token until it comes back empty and returns every item in
page order.
"""

import logging
from typing import Callable, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

ItemT = TypeVar('ItemT')
RequestT = TypeVar('RequestT', bound=BaseModel)


def collect_pages(
    fetch_page: Callable[[RequestT], Tuple[List[ItemT], Optional[str]]],
    request: RequestT,
) -> List[ItemT]:
    """Fetch pages until the continuation token is empty.

    ``request`` must have a ``next_token`` field; each follow-up request is a
    copy of it carrying the token from the previous page. An exception from
    any page propagates and the pages already fetched are discarded.

    Args:
        fetch_page: Sends one request, returns (items, next_token)
        request: First request

    Returns:
        Items of all pages, concatenated in page order

    Examples:
        >>> collect_pages(api._describe_page, DescribeLogStreamsRequest(log_group_name="app"))
    """
    items: List[ItemT] = []
    pages = 0
    while True:
        page_items, next_token = fetch_page(request)
        items.extend(page_items)
        pages += 1
        if not next_token:
            break
        request = request.model_copy(update={'next_token': next_token})

    logger.debug(f"Collected {len(items)} items across {pages} page(s)")
    return items
