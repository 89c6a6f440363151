from typing import TypedDict


class PaginationQuery(TypedDict, total=False):
    page: int  # 1-based
    limit: int  # items per page
