from .customer_schema import CustomerIn, ValidationErrors, validate_customer
__all__ = [
    "CustomerIn", "ValidationErrors", "validate_customer",
]
