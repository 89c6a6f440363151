"""Categories service for Peakmails Python SDK."""

from typing import TYPE_CHECKING, Optional

from ..types.queries import PaginationQuery
from ..types.responses import CategoriesListResponseType
from ..utils.validation import validate_pagination_query

if TYPE_CHECKING:
    from ..client.http import HTTPClient


class CategoriesService:
    """Service for category operations."""

    def __init__(self, http_client: "HTTPClient") -> None:
        self.http_client = http_client

    async def list_categories(self, query: Optional[PaginationQuery] = None) -> CategoriesListResponseType:
        """List categories.

        Args:
            query: Optional pagination (page, limit)

        Returns:
            Page of categories
        """
        qs_params = validate_pagination_query(query)
        return await self.http_client.request("/categories", "GET", query=qs_params)
