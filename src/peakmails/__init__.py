"""
Peakmails Python SDK

Client for the Peakmails email-marketing API with two profiles.
- Signed profile: project-scoped, email-based operations; every request carries
  an origin and a signature token derived from the API key
- Legacy profile: contact-ID based and paginated operations using only
  Authorization Bearer and domain headers
- Async/await support throughout
- Type safety with TypedDict interfaces
"""

import logging
from typing import List, Mapping, Optional, Union

# Export all types
from .types import (
    ApiErrorResponseType,
    ApiResponseType,
    CategoriesListResponseType,
    CategoryAssignment,
    CategoryType,
    ContactData,
    ContactResponseType,
    OriginProvider,
    PaginationQuery,
    ScenarioCustomFieldsRequest,
    ScenarioCustomFieldsResponseType,
    ScenariosListResponseType,
    ScenarioTrigger,
    ScenarioType,
    SDKOptionsType,
)

from .errors import (
    ConfigurationError,
    OriginUnavailableError,
    PeakmailsError,
    TransportError,
    UnexpectedClientError,
    UpstreamApiError,
    ValidationError,
)

# Import internal modules
from .client.auth import BACKEND_ORIGIN, generate_token, origin_from_url, static_origin
from .client.http import HTTPClient
from .config import ClientConfig
from .services.categories import CategoriesService
from .services.contacts import ContactsService
from .services.scenarios import ScenariosService

logging.getLogger(__name__).addHandler(logging.NullHandler())


class PeakmailsClient:
    """Signed, project-scoped Peakmails client.

    Requests are bound to an origin: the backend sentinel when a secret key is
    configured, otherwise the value returned by the ``originProvider`` option.
    """

    def __init__(self, options: SDKOptionsType) -> None:
        """Create a new PeakmailsClient.

        Args:
            options: SDK options with apiKey, domain, projectId and optional
                secretKey, originProvider and timeout

        Raises:
            ConfigurationError: If a required option is missing or invalid
        """
        self.config = ClientConfig.from_options(options, require_project=True)
        self.http_client = HTTPClient(self.config)
        self.contacts_service = ContactsService(self.http_client)
        self.scenarios_service = ScenariosService(self.http_client)

        self.base_url = self.config.base_url
        self.domain = self.config.domain
        self.project_id = self.config.project_id

    def resolve_origin(self) -> str:
        """Origin the next request will be bound to."""
        return self.http_client.resolve_origin()

    def generate_token(self, origin: str) -> str:
        """Signature token for the given origin."""
        return self.http_client.generate_token(origin)

    async def add_contact(self, contact_data: ContactData) -> ContactResponseType:
        """Add a new contact.

        Args:
            contact_data: Contact payload with email, optional name and customFields

        Returns:
            Created contact as returned by the API
        """
        return await self.contacts_service.add_contact(contact_data)

    async def add_contact_to_categories(self, assignment: CategoryAssignment) -> ApiResponseType:
        """Assign a contact to one or more categories.

        Args:
            assignment: Payload with email and a non-empty list of categories
        """
        return await self.contacts_service.add_contact_to_categories(assignment)

    async def trigger_scenario(self, trigger: ScenarioTrigger) -> ApiResponseType:
        """Trigger a scenario for a contact.

        Args:
            trigger: Payload with scenario id and email
        """
        return await self.scenarios_service.trigger_scenario(trigger)

    async def get_scenario_custom_fields(
        self, request: ScenarioCustomFieldsRequest
    ) -> ScenarioCustomFieldsResponseType:
        """Get the custom fields for a scenario.

        Args:
            request: Payload with scenario id
        """
        return await self.scenarios_service.get_scenario_custom_fields(request)


class PeakmailsLegacyClient:
    """Unsigned Peakmails client with contact-ID based and paginated operations."""

    def __init__(self, options: SDKOptionsType) -> None:
        """Create a new PeakmailsLegacyClient.

        Args:
            options: SDK options with apiKey and domain

        Raises:
            ConfigurationError: If a required option is missing or invalid
        """
        self.config = ClientConfig.from_options(options, require_project=False)
        self.http_client = HTTPClient(self.config)
        self.contacts_service = ContactsService(self.http_client)
        self.scenarios_service = ScenariosService(self.http_client)
        self.categories_service = CategoriesService(self.http_client)

        self.base_url = self.config.base_url
        self.domain = self.config.domain

    # Contacts
    async def add_contact(self, contact_data: ContactData) -> ContactResponseType:
        """Add a new contact."""
        return await self.contacts_service.add_contact(contact_data)

    async def add_contact_to_categories(self, contact_id: str, category_ids: List[str]) -> ContactResponseType:
        """Add a contact to one or more categories.

        Args:
            contact_id: Contact ID
            category_ids: Non-empty list of category IDs

        Returns:
            Updated contact
        """
        return await self.contacts_service.add_contact_id_to_categories(contact_id, category_ids)

    async def get_contact_details(self, contact_id: str) -> ContactResponseType:
        """Get details of a specific contact."""
        return await self.contacts_service.get_contact_details(contact_id)

    # Scenarios
    async def trigger_scenario(self, scenario_id: str, contact_id: str) -> ApiResponseType:
        """Trigger a scenario for a specific contact."""
        return await self.scenarios_service.trigger_scenario_for_contact(scenario_id, contact_id)

    async def get_scenarios(self, query: Optional[PaginationQuery] = None) -> ScenariosListResponseType:
        """Get a page of scenarios.

        Args:
            query: Optional page and limit
        """
        return await self.scenarios_service.list_scenarios(query)

    async def get_scenario_custom_fields(self, scenario_id: str) -> ScenarioCustomFieldsResponseType:
        """Get the custom fields for a scenario."""
        return await self.scenarios_service.get_scenario_custom_fields_by_id(scenario_id)

    # Categories
    async def get_categories(self, query: Optional[PaginationQuery] = None) -> CategoriesListResponseType:
        """Get a page of categories.

        Args:
            query: Optional page and limit
        """
        return await self.categories_service.list_categories(query)


def Peakmails(options: SDKOptionsType) -> Union[PeakmailsClient, PeakmailsLegacyClient]:
    """Create a client for the profile the options describe.

    The signed client is returned when a projectId is configured, the legacy
    client otherwise.
    """
    if isinstance(options, Mapping) and options.get('projectId') is not None:
        return PeakmailsClient(options)
    return PeakmailsLegacyClient(options)


__all__ = [
    # Clients
    "Peakmails",
    "PeakmailsClient",
    "PeakmailsLegacyClient",

    # Signing
    "BACKEND_ORIGIN",
    "generate_token",
    "origin_from_url",
    "static_origin",

    # Errors
    "PeakmailsError",
    "ConfigurationError",
    "ValidationError",
    "OriginUnavailableError",
    "UpstreamApiError",
    "TransportError",
    "UnexpectedClientError",

    # Types
    "SDKOptionsType",
    "OriginProvider",
    "ContactData",
    "CategoryAssignment",
    "ScenarioTrigger",
    "ScenarioCustomFieldsRequest",
    "PaginationQuery",
    "ApiErrorResponseType",
    "ApiResponseType",
    "ContactResponseType",
    "ScenarioType",
    "CategoryType",
    "ScenariosListResponseType",
    "CategoriesListResponseType",
    "ScenarioCustomFieldsResponseType",
]
