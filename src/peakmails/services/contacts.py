"""Contacts service for Peakmails Python SDK."""

from typing import TYPE_CHECKING, List

from ..types.contact import CategoryAssignment, ContactData
from ..types.responses import ApiResponseType, ContactResponseType
from ..utils.validation import (
    require_mapping,
    require_string,
    require_string_list,
    validate_contact_data,
)

if TYPE_CHECKING:
    from ..client.http import HTTPClient


class ContactsService:
    """Service for contact operations."""

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize contacts service.

        Args:
            http_client: HTTP client instance
        """
        self.http_client = http_client

    async def add_contact(self, contact_data: ContactData) -> ContactResponseType:
        """Add a new contact.

        Args:
            contact_data: Contact payload with required email, optional name and customFields

        Returns:
            Created contact
        """
        validate_contact_data(contact_data)
        return await self.http_client.request("/contacts", "POST", dict(contact_data))

    async def add_contact_to_categories(self, assignment: CategoryAssignment) -> ApiResponseType:
        """Assign a contact, identified by email, to one or more categories.

        Args:
            assignment: Payload with email and a non-empty list of category names

        Returns:
            Assignment result
        """
        require_mapping(assignment, 'category assignment')
        email = require_string(assignment.get('email'), 'email address')
        categories = require_string_list(assignment.get('categories'), 'categories')
        return await self.http_client.request(
            "/contacts/categories",
            "POST",
            {"email": email, "categories": categories},
        )

    async def add_contact_id_to_categories(self, contact_id: str, category_ids: List[str]) -> ContactResponseType:
        """Add a contact, identified by id, to one or more categories.

        Args:
            contact_id: Contact ID
            category_ids: Non-empty list of category IDs

        Returns:
            Updated contact
        """
        require_string(contact_id, 'contact ID')
        require_string_list(category_ids, 'category IDs')
        encoded_id = self.http_client.encode_url_component(contact_id)
        return await self.http_client.request(
            f"/contacts/{encoded_id}/categories",
            "POST",
            {"categoryIds": category_ids},
        )

    async def get_contact_details(self, contact_id: str) -> ContactResponseType:
        """Retrieve a contact by id."""
        require_string(contact_id, 'contact ID')
        encoded_id = self.http_client.encode_url_component(contact_id)
        return await self.http_client.request(f"/contacts/{encoded_id}", "GET")
