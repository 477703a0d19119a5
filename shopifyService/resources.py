"""
Resource Registry
Maps every supported resource collection to its endpoint template and model.
"""

from enum import Enum
from typing import Dict, NamedTuple, Type, Union

from .exceptions import UnknownOperationError
from .models import Asset, Model, Order, Product, Theme


class ResourceType(Enum):
    """Resource collections the client can address"""
    ORDERS = "orders"
    PRODUCTS = "products"
    THEMES = "themes"
    ASSETS = "assets"


class ResourceDefinition(NamedTuple):
    resource: ResourceType
    template: str
    model: Type[Model]


class ResourceRegistry:
    """
    Registry of resource definitions.
    Filled once at import time; lookups accept the enum or its name.
    """

    _registry: Dict[ResourceType, ResourceDefinition] = {}

    @classmethod
    def register(cls, resource: ResourceType, template: str, model: Type[Model]):
        """
        Register a resource collection.

        :param resource: Resource type
        :param template: Endpoint template below the admin prefix, ``%s`` for path parameters
        :param model: Model class used to hydrate responses
        """
        cls._registry[resource] = ResourceDefinition(resource, template, model)

    @classmethod
    def resolve(cls, resource: Union[ResourceType, str]) -> ResourceType:
        if isinstance(resource, ResourceType):
            return resource
        try:
            return ResourceType(resource)
        except ValueError:
            raise UnknownOperationError(str(resource)) from None

    @classmethod
    def get(cls, resource: Union[ResourceType, str]) -> ResourceDefinition:
        """
        Look up a resource definition.

        :raises UnknownOperationError: If the resource is not registered
        """
        resource_type = cls.resolve(resource)
        if resource_type not in cls._registry:
            raise UnknownOperationError(resource_type.value)
        return cls._registry[resource_type]

    @classmethod
    def has(cls, name: str) -> bool:
        return any(resource.value == name for resource in cls._registry)


def _register_resources():
    """Register the built-in resource collections"""
    ResourceRegistry.register(ResourceType.ORDERS, "orders", Order)
    ResourceRegistry.register(ResourceType.PRODUCTS, "products", Product)
    ResourceRegistry.register(ResourceType.THEMES, "themes", Theme)
    ResourceRegistry.register(ResourceType.ASSETS, "themes/%s/assets", Asset)


# Register on module load
_register_resources()
