from typing import Any, Dict, List, Mapping, Optional

from ..errors import ValidationError


def require_string(value: Any, label: str) -> str:
    """Return value if it is a non-empty string, otherwise raise ValidationError."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f'Invalid {label}')
    return value


def require_string_list(value: Any, label: str) -> List[str]:
    """Validate a non-empty list of non-empty strings."""
    if not isinstance(value, list) or len(value) == 0:
        raise ValidationError(f'Invalid {label}')
    for item in value:
        require_string(item, label)
    return value


def require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValidationError(f'Invalid {label}')
    return value


def validate_contact_data(contact_data: Any) -> None:
    """Validate an add-contact payload: email is required, name and customFields are optional."""
    require_mapping(contact_data, 'contact data')
    require_string(contact_data.get('email'), 'email address')
    if contact_data.get('name') is not None and not isinstance(contact_data['name'], str):
        raise ValidationError('Invalid name')
    if contact_data.get('customFields') is not None:
        require_mapping(contact_data['customFields'], 'custom fields')


def validate_pagination_query(query: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Validate page/limit and return them as query string parameters."""
    if query is None:
        return {}
    require_mapping(query, 'pagination options')

    qs_params: Dict[str, str] = {}
    for key in ('page', 'limit'):
        value = query.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValidationError(f'{key} must be a positive integer')
        qs_params[key] = str(value)
    return qs_params
