from typing import Any, Dict, List, NotRequired, TypedDict


class ContactResponseType(TypedDict, total=False):
    id: str
    email: str
    name: str
    customFields: Dict[str, Any]
    categories: List[str]


class ScenarioType(TypedDict, total=False):
    id: str
    name: str


class CategoryType(TypedDict, total=False):
    id: str
    name: str


class ScenariosListResponseType(TypedDict, total=False):
    data: List[ScenarioType]
    page: int
    limit: int
    total: int


class CategoriesListResponseType(TypedDict, total=False):
    data: List[CategoryType]
    page: int
    limit: int
    total: int


class ScenarioCustomFieldsResponseType(TypedDict, total=False):
    scenario: str
    customFields: List[Any]


class ApiErrorResponseType(TypedDict):
    message: str
    error: NotRequired[str]


# Upstream responses are returned verbatim; these types describe the usual shape only
ApiResponseType = Any
