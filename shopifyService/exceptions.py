"""
Shopify client errors.

HTTP and network failures are not wrapped: they surface as the original
``requests`` exceptions so callers can inspect ``error.response.status_code``.
"""

from typing import Any, Optional

import requests

# Transport/HTTP failures propagate as-is from requests
TransportError = requests.exceptions.RequestException


class ShopifyError(Exception):
    """Base class for errors raised by the client itself"""


class ModelNotFoundError(ShopifyError):
    """The server answered 404 for a single-resource fetch"""

    def __init__(self, resource: str, id: Any, message: Optional[str] = None):
        self.resource = resource
        self.id = id
        super().__init__(message or f"Model({id}) not found for `{resource}`")


class MissingPathParameter(ShopifyError, ValueError):
    """An endpoint template needs a path parameter that was not supplied"""

    def __init__(self, template: str, expected: int, given: int):
        self.template = template
        self.expected = expected
        self.given = given
        super().__init__(
            f"Endpoint `{template}` needs {expected} path parameter(s), got {given}"
        )


class UnknownOperationError(ShopifyError, AttributeError):
    """The facade was asked for a resource that is not registered"""

    def __init__(self, name: str):
        super().__init__(f"Method {name} does not exist.")
        self.name = name


class ModelNotPersistedError(ShopifyError):
    """A server-side operation needs a model that has been synced at least once"""


class ConfigurationError(ShopifyError, ValueError):
    """Client configuration is missing or invalid"""
