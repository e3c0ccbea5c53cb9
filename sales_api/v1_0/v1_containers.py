from dependency_injector import containers, providers
from sales_api.utils.tx import UnitOfWork
from sales_api.v1_0.repositories import CustomerRepository
from sales_api.v1_0.services import CustomerService

class APIContainer(containers.DeclarativeContainer):
    customer_repository = providers.Singleton(CustomerRepository)
    unit_of_work_factory = providers.Object(UnitOfWork)

    customer_service = providers.Singleton(
        CustomerService,
        customer_repository=customer_repository,
        unit_of_work_factory=unit_of_work_factory,
    )
