from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError

class CustomerIn(BaseModel):
    """Input schema for creating or fully replacing a customer."""
    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "name": "Acme",
                "tax_id": "123456789",
                "email": "sales@acme.example",
                "phone": "+573007778888",
                "address": "123 Main St",
                "city": "Medellin",
            }
        },
    )

    name: str = Field(..., min_length=1, max_length=120)
    tax_id: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)
    address: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=80)


ValidationErrors = Dict[str, List[str]]


def _error_key(loc: Tuple[Any, ...]) -> str:
    key = ".".join(str(part) for part in loc)
    return key or "body"


def validate_customer(data: Any) -> Tuple[Optional[CustomerIn], ValidationErrors]:
    """
    Run the structural/semantic checks on a customer shape.

    Returns the parsed model and an empty dict when valid, otherwise
    ``None`` and the messages keyed by field.
    """
    try:
        return CustomerIn.model_validate(data), {}
    except ValidationError as e:
        errors: ValidationErrors = {}
        for err in e.errors():
            errors.setdefault(_error_key(err["loc"]), []).append(err["msg"])
        return None, errors
