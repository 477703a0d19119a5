"""
Resource models.
Each model keeps the last server-confirmed state next to the local one so
that only changed fields are sent on update.
"""

import copy
from typing import Any, Dict, List, NamedTuple, Optional

from .endpoints import is_absent


class ModelDescriptor(NamedTuple):
    """Envelope keys and primary key for one resource type"""
    resource_name: str
    resource_name_many: str
    identifier: str = "id"


class Model:
    """
    A single API resource.

    ``attributes`` holds the current (possibly edited) values and ``original``
    the values last synced with the server. The two never share nested
    objects, and ``original`` is only ever replaced as a whole.
    """

    descriptor: ModelDescriptor

    def __init__(self, attributes: Optional[Dict[str, Any]] = None, **kwargs: Any):
        """
        :param attributes: Initial field values
        :param kwargs: Extra field values, applied over ``attributes``
        """
        self.attributes: Dict[str, Any] = copy.deepcopy(dict(attributes or {}, **kwargs))
        self.original: Dict[str, Any] = {}
        self.exists = False

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "Model":
        """Hydrate a model from an unwrapped server payload"""
        model = cls(data)
        model.sync_original()
        return model

    # ------------- Descriptor -------------

    @classmethod
    def resource_name(cls) -> str:
        return cls.descriptor.resource_name

    @classmethod
    def resource_name_many(cls) -> str:
        return cls.descriptor.resource_name_many

    @classmethod
    def identifier(cls) -> str:
        return cls.descriptor.identifier

    @classmethod
    def unwrap(cls, data: Any, many: bool = False) -> Any:
        """Strip the singular (or plural) envelope key if the payload has one"""
        key = cls.resource_name_many() if many else cls.resource_name()
        if isinstance(data, dict) and key in data:
            return data[key]
        return data

    # ------------- Attributes -------------

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def set_attribute(self, key: str, value: Any) -> "Model":
        self.attributes[key] = value
        return self

    def fill(self, attributes: Dict[str, Any]) -> "Model":
        """Set several fields at once"""
        for key, value in attributes.items():
            self.set_attribute(key, value)
        return self

    def __getitem__(self, key: str) -> Any:
        return self.attributes[key]

    def __setitem__(self, key: str, value: Any):
        self.set_attribute(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self.attributes

    def get_key(self) -> Any:
        """Current value of the primary key"""
        return self.get_attribute(self.identifier())

    def get_original(self, key: Optional[str] = None, default: Any = None) -> Any:
        if key is None:
            return copy.deepcopy(self.original)
        return self.original.get(key, default)

    def is_new(self) -> bool:
        return is_absent(self.get_key())

    # ------------- Dirty tracking -------------

    def get_dirty(self) -> Dict[str, Any]:
        """Fields whose value differs from the last synced state"""
        return {
            key: value
            for key, value in self.attributes.items()
            if key not in self.original or self.original[key] != value
        }

    def is_dirty(self, *keys: str) -> bool:
        dirty = self.get_dirty()
        if not keys:
            return bool(dirty)
        return any(key in dirty for key in keys)

    def sync_original(self, data: Optional[Dict[str, Any]] = None) -> "Model":
        """
        Mark the current state as server-confirmed.

        :param data: Server payload; when given it replaces ``attributes`` first
        """
        if isinstance(data, dict):
            self.attributes = copy.deepcopy(data)
        self.original = copy.deepcopy(self.attributes)
        self.exists = True
        return self

    # ------------- Serialization -------------

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self.attributes)

    def to_payload(self) -> Dict[str, Any]:
        """
        Request body wrapped in the singular envelope key.
        New models send every field; persisted ones only the changed fields
        plus their identifier.
        """
        if self.is_new() or not self.exists:
            body = self.to_dict()
        else:
            body = copy.deepcopy(self.get_dirty())
            body[self.identifier()] = self.get_key()
        return {self.resource_name(): body}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.identifier()}={self.get_key()!r}>"


class Order(Model):
    descriptor = ModelDescriptor("order", "orders")

    @property
    def line_items(self) -> List[Dict[str, Any]]:
        return self.attributes.get("line_items") or []


class Product(Model):
    descriptor = ModelDescriptor("product", "products")

    @property
    def variants(self) -> List[Dict[str, Any]]:
        return self.attributes.get("variants") or []


class Theme(Model):
    descriptor = ModelDescriptor("theme", "themes")

    def is_published(self) -> bool:
        """The published theme has the ``main`` role"""
        return self.attributes.get("role") == "main"


class Asset(Model):
    """A theme file. Assets are nested under a theme: ``themes/<theme_id>/assets``"""
    descriptor = ModelDescriptor("asset", "assets")
