from typing import TypedDict


class ScenarioTrigger(TypedDict):
    scenario: str
    email: str


class ScenarioCustomFieldsRequest(TypedDict):
    scenario: str
