# Export all types
from .common import OriginProvider, SDKOptionsType
from .contact import CategoryAssignment, ContactData
from .queries import PaginationQuery
from .responses import (
    ApiErrorResponseType, ApiResponseType, CategoriesListResponseType, CategoryType,
    ContactResponseType, ScenarioCustomFieldsResponseType, ScenariosListResponseType,
    ScenarioType,
)
from .scenario import ScenarioCustomFieldsRequest, ScenarioTrigger
