from .customer_router import router as customer_router
defined_routers = [
    customer_router,
    ]
