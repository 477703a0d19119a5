"""
Endpoint Resolver
Builds Admin API request paths and normalizes shop URLs.
"""

import re
from typing import Any, Optional, Sequence

from .exceptions import MissingPathParameter

ADMIN_PREFIX = "admin"
FORMAT_SUFFIX = ".json"
PLACEHOLDER = "%s"
SHOP_DOMAIN = ".myshopify.com"


def normalize_shop_url(shop: str) -> str:
    """
    Turn any accepted shop identifier into the canonical base URL.

    ``shop``, ``shop.myshopify.com``, ``https://shop.myshopify.com/`` and
    ``http://shop`` all become ``https://shop.myshopify.com``.
    """
    name = re.sub(r"https?://", "", shop.strip())
    name = name.rstrip("/")
    name = name.replace(SHOP_DOMAIN, "")
    return f"https://{name}{SHOP_DOMAIN}"


def admin_prefix(api_version: Optional[str] = None) -> str:
    """``admin`` for the unversioned API, ``admin/api/<version>`` otherwise"""
    if api_version:
        return f"{ADMIN_PREFIX}/api/{api_version}"
    return ADMIN_PREFIX


def is_absent(segment: Any) -> bool:
    # Only None and "" count as missing. Filtering on falsiness would drop a
    # legitimate id of 0; Shopify never issues id 0, so this is unverified
    # against the live API.
    return segment is None or segment == ""


def substitute(template: str, path_params: Sequence[Any] = ()) -> str:
    """Fill the template's ``%s`` placeholders positionally, ignoring extras"""
    expected = template.count(PLACEHOLDER)
    if not expected:
        return template

    if len(path_params) < expected:
        raise MissingPathParameter(template, expected, len(path_params))

    return template % tuple(path_params[:expected])


def build_endpoint(
    template: str,
    path_params: Sequence[Any] = (),
    *segments: Any,
    prefix: str = ADMIN_PREFIX
) -> str:
    """
    Build a full request path.

    :param template: Resource template, e.g. ``themes/%s/assets``
    :param path_params: Values for the template placeholders
    :param segments: Trailing segments (sub-path, id, action); absent ones are dropped
    :param prefix: Namespace prefix, see :func:`admin_prefix`
    :return: Path such as ``/admin/themes/123/assets/456.json``
    """
    parts = [prefix, substitute(template, path_params), *segments]
    path = "/".join(str(part) for part in parts if not is_absent(part))
    return f"/{path}{FORMAT_SUFFIX}"
