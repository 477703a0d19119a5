import logging
from typing import Any, Dict, Optional, Union

import requests

from .config_helper import ShopifyConfig, ShopifyConfigManager
from .endpoints import admin_prefix, normalize_shop_url
from .exceptions import UnknownOperationError
from .resource_client import ResourceClient
from .resources import ResourceRegistry, ResourceType

logger = logging.getLogger(__name__)


class ShopifyClient:
    """
    Python client for the Shopify Admin REST API.

    Resources are reached through handles, either explicitly or as attributes:

        shopify = ShopifyClient("amar-store", "shpat_xxx")
        shopify.resource(ResourceType.PRODUCTS).find(632910392)
        shopify.products.count()
        shopify.assets(828155753).all()

    Unknown attribute names raise UnknownOperationError (an AttributeError).
    """

    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize the Shopify Client.

        :param shop: Shop name or URL (e.g. amar-store, https://amar-store.myshopify.com/)
        :param access_token: Admin API access token
        :param api_version: Admin API version; unversioned paths when omitted
        :param timeout: Request timeout in seconds; transport default when omitted
        """
        self.base_url = normalize_shop_url(shop)
        self.api_version = api_version
        self.timeout = timeout
        self.headers = {
            "X-Shopify-Access-Token": access_token,
            "Accept": "application/json",
            "Content-Type": "application/json; charset=utf-8",
        }

    @classmethod
    def from_config(cls, config: ShopifyConfig) -> "ShopifyClient":
        return cls(
            shop=config.shop,
            access_token=config.access_token,
            api_version=config.api_version,
            timeout=config.timeout,
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "ShopifyClient":
        """Build a client from SHOPIFY_* environment variables"""
        return cls.from_config(ShopifyConfigManager.get_config_from_env(env_file))

    @property
    def admin_prefix(self) -> str:
        return admin_prefix(self.api_version)

    # ------------- Resource selection -------------

    def resource(self, resource: Union[ResourceType, str], *path_params: Any) -> ResourceClient:
        """
        Get a handle for a resource collection.

        :param resource: Resource type or its name, e.g. "assets"
        :param path_params: Values for nested endpoints, e.g. the theme id for assets
        :raises UnknownOperationError: If the resource is not registered
        """
        return ResourceClient(self, ResourceRegistry.get(resource), path_params)

    def __getattr__(self, name: str) -> ResourceClient:
        # Only reached for names not found normally: shopify.orders, shopify.assets(1)
        if name.startswith("_") or not ResourceRegistry.has(name):
            raise UnknownOperationError(name)
        return self.resource(name)

    # ------------- Transport -------------

    def request(
        self,
        method: str,
        path: str,
        query: Optional[Dict[str, Any]] = None,
        payload: Any = None
    ) -> Any:
        """
        Send a request and decode the JSON body.

        :param method: HTTP method
        :param path: Path below the shop URL, e.g. /admin/orders.json
        :param query: Query parameters
        :param payload: JSON body
        :return: Decoded body, None for an empty body
        :raises requests.HTTPError: For any 4xx/5xx response
        """
        logger.debug(f"{method} {path}")

        response = requests.request(
            method,
            f"{self.base_url}{path}",
            headers=self.headers,
            params=query or None,
            json=payload,
            timeout=self.timeout,
        )
        response.raise_for_status()

        if not response.content:
            return None
        return response.json()

    # ------------- Connection Test -------------

    def test_connection(self) -> bool:
        """Verify Shopify API connectivity"""
        try:
            self.resource(ResourceType.PRODUCTS).count()
            return True
        except requests.RequestException as e:
            logger.warning(f"Shopify connection test failed for {self.base_url}: {e}")
            return False
