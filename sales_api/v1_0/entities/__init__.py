from .customer_DTO import (
    CUSTOMER_FIELDS,
    CustomerDTO,
    apply_customer_input,
    customer_to_dto,
    customer_to_patchable,
    new_customer,
)
from .link_DTO import HttpMethod, LinkDTO
from .outcome import (
    BadRequest,
    Created,
    NoContent,
    NotFound,
    Ok,
    Outcome,
    PersistenceFailure,
    UnprocessableEntity,
)


__all__ = [
    "CUSTOMER_FIELDS", "CustomerDTO",
    "apply_customer_input", "customer_to_dto", "customer_to_patchable", "new_customer",
    "HttpMethod", "LinkDTO",
    "BadRequest", "Created", "NoContent", "NotFound", "Ok", "Outcome",
    "PersistenceFailure", "UnprocessableEntity",
]
