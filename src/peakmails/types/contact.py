from typing import Any, Dict, List, NotRequired, TypedDict


class ContactData(TypedDict):
    email: str
    name: NotRequired[str]
    customFields: NotRequired[Dict[str, Any]]  # any JSON serializable values


class CategoryAssignment(TypedDict):
    email: str
    categories: List[str]
