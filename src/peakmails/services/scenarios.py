"""Scenarios service for Peakmails Python SDK."""

from typing import TYPE_CHECKING, Optional

from ..types.queries import PaginationQuery
from ..types.responses import (
    ApiResponseType,
    ScenarioCustomFieldsResponseType,
    ScenariosListResponseType,
)
from ..types.scenario import ScenarioCustomFieldsRequest, ScenarioTrigger
from ..utils.validation import require_mapping, require_string, validate_pagination_query

if TYPE_CHECKING:
    from ..client.http import HTTPClient


class ScenariosService:
    """Service for scenario operations."""

    def __init__(self, http_client: "HTTPClient") -> None:
        self.http_client = http_client

    async def trigger_scenario(self, trigger: ScenarioTrigger) -> ApiResponseType:
        """Trigger a scenario for the contact with the given email.

        Args:
            trigger: Payload with scenario id and email

        Returns:
            Trigger result
        """
        require_mapping(trigger, 'scenario trigger')
        scenario = require_string(trigger.get('scenario'), 'scenario ID')
        email = require_string(trigger.get('email'), 'email address')
        return await self.http_client.request(
            "/scenarios/trigger",
            "POST",
            {"scenario": scenario, "email": email},
        )

    async def trigger_scenario_for_contact(self, scenario_id: str, contact_id: str) -> ApiResponseType:
        """Trigger a scenario for a contact identified by id."""
        require_string(scenario_id, 'scenario ID')
        require_string(contact_id, 'contact ID')
        encoded_id = self.http_client.encode_url_component(scenario_id)
        return await self.http_client.request(
            f"/scenarios/{encoded_id}/trigger",
            "POST",
            {"contactId": contact_id},
        )

    async def get_scenario_custom_fields(
        self, request: ScenarioCustomFieldsRequest
    ) -> ScenarioCustomFieldsResponseType:
        """Fetch the custom fields of a scenario, passing its id as a query parameter."""
        require_mapping(request, 'scenario custom fields request')
        scenario = require_string(request.get('scenario'), 'scenario ID')
        return await self.http_client.request(
            "/scenarios/custom-fields", "GET", query={"scenario": scenario}
        )

    async def get_scenario_custom_fields_by_id(self, scenario_id: str) -> ScenarioCustomFieldsResponseType:
        """Fetch the custom fields of a scenario addressed by path."""
        require_string(scenario_id, 'scenario ID')
        encoded_id = self.http_client.encode_url_component(scenario_id)
        return await self.http_client.request(f"/scenarios/{encoded_id}/custom-fields", "GET")

    async def list_scenarios(self, query: Optional[PaginationQuery] = None) -> ScenariosListResponseType:
        """List scenarios.

        Args:
            query: Optional pagination (page, limit)

        Returns:
            Page of scenarios
        """
        qs_params = validate_pagination_query(query)
        return await self.http_client.request("/scenarios", "GET", query=qs_params)
