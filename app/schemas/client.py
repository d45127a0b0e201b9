"""
API schemas for Client endpoints
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

CLIENT_FIELDS = ("ci", "firstName", "lastName", "phone", "address")

CLIENT_EXAMPLE = {
    "ci": "1726647066",
    "firstName": "Christopher",
    "lastName": "Pallo",
    "phone": "0995312828",
    "address": "Condado",
}


def _string_field(description: str, example: str) -> Any:
    # Values are stored as received, so the schema documents strings
    # without enforcing them
    return Field(
        None,
        description=description,
        examples=[example],
        json_schema_extra={"type": "string"},
    )


class ClientCreate(BaseModel):
    """Client object that needs to be created"""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": CLIENT_EXAMPLE},
    )

    ci: Any = _string_field("Identity card number", CLIENT_EXAMPLE["ci"])
    firstName: Any = _string_field("First name", CLIENT_EXAMPLE["firstName"])
    lastName: Any = _string_field("Last name", CLIENT_EXAMPLE["lastName"])
    phone: Any = _string_field("Phone number", CLIENT_EXAMPLE["phone"])
    address: Any = _string_field("Address", CLIENT_EXAMPLE["address"])

    def to_item(self) -> Dict[str, Any]:
        """Store item built verbatim from the fields the caller sent"""
        return self.model_dump(include=set(CLIENT_FIELDS), exclude_unset=True)


class ClientResponse(BaseModel):
    """Client created"""

    model_config = ConfigDict(json_schema_extra={"example": CLIENT_EXAMPLE})

    ci: str
    firstName: str
    lastName: str
    phone: str
    address: str
