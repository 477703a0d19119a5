"""
Access scopes an app can request when it is installed on a shop.
Not used by the client itself; exposed for callers building install URLs.
"""

from enum import Enum
from typing import Iterable, List


class Scope(str, Enum):
    """Admin API permission strings"""
    READ_ANALYTICS = "read_analytics"
    READ_CHECKOUTS = "read_checkouts"
    READ_CONTENT = "read_content"
    READ_CUSTOMERS = "read_customers"
    READ_DRAFT_ORDERS = "read_draft_orders"
    READ_FULFILLMENTS = "read_fulfillments"
    READ_ORDERS = "read_orders"
    READ_PRICE_RULES = "read_price_rules"
    READ_PRODUCTS = "read_products"
    READ_REPORTS = "read_reports"
    READ_SCRIPT_TAGS = "read_script_tags"
    READ_SHIPPING = "read_shipping"
    READ_THEMES = "read_themes"
    READ_USERS = "read_users"
    WRITE_CHECKOUTS = "write_checkouts"
    WRITE_CONTENT = "write_content"
    WRITE_CUSTOMERS = "write_customers"
    WRITE_DRAFT_ORDERS = "write_draft_orders"
    WRITE_FULFILLMENTS = "write_fulfillments"
    WRITE_ORDERS = "write_orders"
    WRITE_PRICE_RULES = "write_price_rules"
    WRITE_PRODUCTS = "write_products"
    WRITE_REPORTS = "write_reports"
    WRITE_SCRIPT_TAGS = "write_script_tags"
    WRITE_SHIPPING = "write_shipping"
    WRITE_THEMES = "write_themes"
    WRITE_USERS = "write_users"


SCOPES: List[str] = [scope.value for scope in Scope]


def join_scopes(scopes: Iterable[str]) -> str:
    """Comma-join scopes the way the OAuth authorize URL expects them"""
    return ",".join(Scope(scope).value for scope in scopes)
