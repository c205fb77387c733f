"""
Shared conversion helpers for the JSON record mappers.
Stored records use camelCase keys and ISO-8601 strings for dates.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Union

from invoiceflow.domain.models.value_objects import Address


# Exceptions a malformed record can raise while being mapped
MAPPING_ERRORS = (ValueError, TypeError, KeyError, AttributeError)


def to_number(value: Any, default: Union[int, float] = 0) -> Union[int, float]:
    """Read a numeric field; numeric strings are accepted, blanks give default."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    return float(value)


def to_text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def format_datetime(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_datetime(value: Optional[str], default: datetime) -> datetime:
    if not value:
        return default
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: Optional[str], default: Optional[date] = None) -> Optional[date]:
    if not value:
        return default
    # Accept full timestamps as well as plain dates
    return date.fromisoformat(value[:10])


def address_to_record(address: Address) -> Dict[str, str]:
    return {
        "street": address.street,
        "city": address.city,
        "state": address.state,
        "zipCode": address.zip_code,
        "country": address.country,
    }


def address_from_record(data: Optional[Dict[str, Any]]) -> Address:
    data = data or {}
    return Address(
        street=to_text(data.get("street")),
        city=to_text(data.get("city")),
        state=to_text(data.get("state")),
        zip_code=to_text(data.get("zipCode")),
        country=to_text(data.get("country")),
    )
