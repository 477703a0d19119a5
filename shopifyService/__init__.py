"""
Shopify Service Package
Typed client for the Shopify Admin REST API.
"""

from .shopify import ShopifyClient
from .resource_client import ResourceClient, MAX_PAGE_SIZE
from .resources import ResourceRegistry, ResourceType, ResourceDefinition
from .models import Model, ModelDescriptor, Order, Product, Theme, Asset
from .endpoints import build_endpoint, normalize_shop_url
from .scopes import Scope, SCOPES, join_scopes
from .config_helper import ShopifyConfig, ShopifyConfigManager, ShopifyConfigValidator
from .exceptions import (
    ShopifyError,
    TransportError,
    ModelNotFoundError,
    MissingPathParameter,
    UnknownOperationError,
    ModelNotPersistedError,
    ConfigurationError,
)

__all__ = [
    'ShopifyClient',
    'ResourceClient',
    'MAX_PAGE_SIZE',
    'ResourceRegistry',
    'ResourceType',
    'ResourceDefinition',
    'Model',
    'ModelDescriptor',
    'Order',
    'Product',
    'Theme',
    'Asset',
    'build_endpoint',
    'normalize_shop_url',
    'Scope',
    'SCOPES',
    'join_scopes',
    'ShopifyConfig',
    'ShopifyConfigManager',
    'ShopifyConfigValidator',
    'ShopifyError',
    'TransportError',
    'ModelNotFoundError',
    'MissingPathParameter',
    'UnknownOperationError',
    'ModelNotPersistedError',
    'ConfigurationError',
]

__version__ = '1.0.0'
