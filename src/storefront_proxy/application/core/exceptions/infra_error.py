from storefront_proxy.application.core.exceptions.domain_error import DomainError


class InfraError(DomainError):
    """
    Base class for failures caused by an external collaborator
    (the store API or the exchange-rate service).
    """
    pass
