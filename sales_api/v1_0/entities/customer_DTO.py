from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Dict, Optional

from sales_api.v1_0.models import Customer
from sales_api.v1_0.schemas import CustomerIn

@dataclass(slots=True)
class CustomerDTO:
    """Public shape of a customer."""
    id: int
    name: str
    tax_id: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    city: Optional[str]


# Declaration order is the natural order of a full projection.
CUSTOMER_FIELDS: Dict[str, Callable[[CustomerDTO], Any]] = {
    "id": attrgetter("id"),
    "name": attrgetter("name"),
    "tax_id": attrgetter("tax_id"),
    "email": attrgetter("email"),
    "phone": attrgetter("phone"),
    "address": attrgetter("address"),
    "city": attrgetter("city"),
}


def customer_to_dto(c: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=c.id,
        name=c.name,
        tax_id=c.tax_id,
        email=c.email,
        phone=c.phone,
        address=c.address,
        city=c.city,
    )


def customer_to_patchable(c: Customer) -> Dict[str, Any]:
    """Editable part of the public shape; ``id`` is not patchable."""
    return {
        "name": c.name,
        "tax_id": c.tax_id,
        "email": c.email,
        "phone": c.phone,
        "address": c.address,
        "city": c.city,
    }


def new_customer(data: CustomerIn) -> Customer:
    c = Customer(deleted=False)
    apply_customer_input(c, data)
    return c


def apply_customer_input(c: Customer, data: CustomerIn) -> Customer:
    """Full replace of the mapped fields; identity and ``deleted`` are untouched."""
    c.name = data.name
    c.tax_id = data.tax_id
    c.email = str(data.email) if data.email is not None else None
    c.phone = data.phone
    c.address = data.address
    c.city = data.city
    return c
