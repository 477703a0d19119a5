"""
Resource Client
CRUD operations for one resource collection, hydrating responses into models.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple, Type, Union

import requests

from .endpoints import build_endpoint, is_absent
from .exceptions import ModelNotFoundError, ModelNotPersistedError
from .models import Model
from .resources import ResourceDefinition

if TYPE_CHECKING:
    from .shopify import ShopifyClient

logger = logging.getLogger(__name__)

# Shopify returns at most this many records per call
MAX_PAGE_SIZE = 250


class ResourceClient:
    """
    Handle bound to one resource type and its path parameters.

    Handles are immutable: calling one with new path parameters returns a new
    handle, so a single :class:`ShopifyClient` can be shared freely.
    """

    def __init__(
        self,
        client: "ShopifyClient",
        definition: ResourceDefinition,
        path_params: Tuple[Any, ...] = ()
    ):
        self._client = client
        self._definition = definition
        self._path_params = tuple(path_params)

    def __call__(self, *path_params: Any) -> "ResourceClient":
        """Same resource, with path parameters for nested endpoints"""
        return ResourceClient(self._client, self._definition, path_params)

    def __repr__(self) -> str:
        return f"<ResourceClient {self._definition.template!r} params={self._path_params!r}>"

    @property
    def definition(self) -> ResourceDefinition:
        return self._definition

    @property
    def model(self) -> Type[Model]:
        return self._definition.model

    @property
    def path_params(self) -> Tuple[Any, ...]:
        return self._path_params

    def endpoint(self, *segments: Any) -> str:
        """Resolve the request path for this resource plus trailing segments"""
        return build_endpoint(
            self._definition.template,
            self._path_params,
            *segments,
            prefix=self._client.admin_prefix
        )

    # ------------- Raw verbs -------------

    def get(self, query: Optional[Dict[str, Any]] = None, suffix: Any = None) -> Any:
        """GET the resource and return the decoded body"""
        return self._client.request("GET", self.endpoint(suffix), query=query)

    def post(self, payload: Union[Model, Dict[str, Any], None] = None, suffix: Any = None) -> Any:
        return self._post_or_put("POST", payload, suffix)

    def put(self, payload: Union[Model, Dict[str, Any], None] = None, suffix: Any = None) -> Any:
        return self._post_or_put("PUT", payload, suffix)

    def delete(self, query: Optional[Dict[str, Any]] = None, suffix: Any = None) -> Any:
        """DELETE the resource and return the decoded body"""
        return self._client.request("DELETE", self.endpoint(suffix), query=query)

    def _post_or_put(self, method: str, payload: Any, suffix: Any) -> Any:
        if isinstance(payload, Model):
            return self._send_model(method, payload, self.endpoint(suffix))

        return self._client.request(method, self.endpoint(suffix), payload=payload or {})

    def _send_model(self, method: str, model: Model, path: str) -> Model:
        data = self._client.request(method, path, payload=model.to_payload())
        model.sync_original(model.unwrap(data))
        return model

    # ------------- Model operations -------------

    def find(self, id: Any) -> Optional[Model]:
        """
        Fetch one resource by id.

        :param id: Resource id
        :return: Hydrated model, or None if the server returned no data
        :raises ModelNotFoundError: If the server answers 404
        """
        try:
            data = self.get(suffix=id)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                raise ModelNotFoundError(self._definition.template, id) from e
            raise

        data = self.model.unwrap(data)
        if not data:
            return None
        return self.model.from_response(data)

    def find_many(self, ids: Union[Iterable[Any], str, int], suffix: Any = None) -> List[Model]:
        """
        Fetch several resources by id in one call (capped at MAX_PAGE_SIZE).

        :param ids: Single id, comma-joined string, or a sequence of ids
        """
        if not isinstance(ids, (str, int)):
            ids = ",".join(str(id) for id in ids if not is_absent(id))
        return self.all({"ids": str(ids)}, suffix)

    def all(self, query: Optional[Dict[str, Any]] = None, suffix: Any = None) -> List[Model]:
        """
        Fetch one page of resources.
        Shopify caps a page at MAX_PAGE_SIZE results and nothing here paginates.
        """
        data = self.model.unwrap(self.get(query, suffix), many=True)
        models = [self.model.from_response(item) for item in data or []]

        if len(models) >= MAX_PAGE_SIZE:
            logger.warning(
                f"{self._definition.template}: received a full page of {len(models)} "
                f"results, more may exist"
            )

        return models

    def save(self, model: Model, suffix: Any = None) -> Model:
        """
        Create (POST) a new model or update (PUT) an existing one.
        The same instance is returned, synced with the server response.
        """
        id = model.get_key()
        method = "POST" if is_absent(id) else "PUT"
        return self._send_model(method, model, self.endpoint(suffix, id))

    def destroy(self, model: Model) -> bool:
        """
        Delete a model by its last synced identifier.

        :return: True if the server confirmed the deletion with an empty JSON object or array
        :raises ModelNotPersistedError: If the model was never synced
        """
        id = model.get_original(model.identifier())
        if is_absent(id):
            raise ModelNotPersistedError(f"{model!r} has not been saved, nothing to delete")

        response = self.delete(suffix=id)

        success = isinstance(response, (dict, list)) and not response
        if success:
            model.exists = False
        return success

    def count(self, query: Optional[Dict[str, Any]] = None, suffix: Any = None) -> Any:
        """Number of resources, or the raw body if it is not a single-field object"""
        data = self._client.request("GET", self.endpoint(suffix, "count"), query=query)

        if isinstance(data, dict) and len(data) == 1:
            return next(iter(data.values()))
        return data
