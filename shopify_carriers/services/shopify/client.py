# shopify_carriers.services.shopify.client

import json
import logging
import requests
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from shopify_carriers.core.config import get_settings
from shopify_carriers.core.exceptions import ShopifyAPIError, ShopifyDecodeError, extract_error_messages

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class RestTransport(Protocol):
    """What a resource client needs from the HTTP layer."""

    def get(self, path: str, response_model: Type[M], params: Optional[Dict[str, Any]] = None) -> Optional[M]: ...

    def post(self, path: str, body: BaseModel, response_model: Type[M]) -> Optional[M]: ...

    def put(self, path: str, body: BaseModel, response_model: Type[M]) -> Optional[M]: ...

    def delete(self, path: str) -> None: ...


def shop_full_name(name: str) -> str:
    """Normalise a shop name to its myshopify domain: "fooshop" -> "fooshop.myshopify.com"."""
    name = name.strip()
    for scheme in ("https://", "http://"):
        if name.lower().startswith(scheme):
            name = name[len(scheme):]
    name = name.strip("/")
    if not name:
        return name
    if "." not in name:
        return f"{name}.myshopify.com"
    return name


class ShopifyRestClient:
    """
    Synchronous client for the Shopify Admin REST API.

    Handles the shop base URL, the versioned admin path prefix, the access token
    header and JSON (de)serialization. Request bodies are pydantic models and
    responses are decoded into the model class the caller supplies.

    No retry or rate-limit handling is done here: any non-2xx response is raised
    as ShopifyAPIError.
    """

    def __init__(
        self,
        shop_url: Optional[str] = None,
        access_token: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        shop_url = shop_url or settings.SHOPIFY_SHOP_URL
        self.access_token = access_token or settings.SHOPIFY_ADMIN_API_ACCESS_TOKEN
        self.api_version = api_version if api_version is not None else settings.SHOPIFY_API_VERSION
        self.timeout = timeout if timeout is not None else settings.SHOPIFY_REQUEST_TIMEOUT

        shop_url = shop_full_name(shop_url or "")
        if not shop_url or not self.access_token:
            raise ValueError(
                "SHOPIFY_SHOP_URL and SHOPIFY_ADMIN_API_ACCESS_TOKEN must be set in .env or as environment variables."
            )

        self.store_domain = shop_url
        self.base_url = f"https://{self.store_domain}"
        self.path_prefix = f"admin/api/{self.api_version}" if self.api_version else "admin"
        self.session = session or requests.Session()

        logger.info(f"ShopifyRestClient initialized for {self.store_domain} (API version: {self.api_version or 'unversioned'})")

    def _get_headers(self) -> Dict[str, str]:
        return {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{self.path_prefix}/{path.lstrip('/')}"

    def _make_request(
        self,
        method: str,
        path: str,
        body: Optional[BaseModel] = None,
        response_model: Optional[Type[M]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Optional[M]:
        """
        Make a request to the Shopify Admin REST API

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: resource path relative to the admin prefix, e.g. "carrier_services.json"
            body: payload for POST/PUT requests
            response_model: model the JSON response is decoded into
            params: query parameters

        Returns:
            The decoded response, or None when there is no model or no body

        Raises:
            ShopifyAPIError: on network failures and non-2xx responses
            ShopifyDecodeError: when the response body does not match response_model
        """
        url = self.build_url(path)
        payload = body.model_dump(mode="json", exclude_none=True) if body is not None else None

        logger.debug(f"Making {method} request to {url}")
        logger.debug("Headers: %s", {**self._get_headers(), "X-Shopify-Access-Token": "[REDACTED]"})
        if params:
            logger.debug(f"Params: {params}")
        if payload is not None:
            logger.debug(f"Data: {json.dumps(payload)[:500]}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=self._get_headers(),
                json=payload,
                params=params,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout calling Shopify {method} {url}: {e}")
            raise ShopifyAPIError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error calling Shopify {method} {url}: {e}")
            raise ShopifyAPIError(f"Network error: {e}") from e

        if not 200 <= response.status_code < 300:
            raise self._error_from_response(response)

        if response_model is None or response.status_code == 204 or not response.content:
            return None

        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Failed to decode Shopify response for {method} {url}: {e}")
            raise ShopifyDecodeError(
                f"Failed to decode response into {response_model.__name__}: {e}",
                status_code=response.status_code,
            ) from e

    def _error_from_response(self, response: requests.Response) -> ShopifyAPIError:
        try:
            messages = extract_error_messages(response.json())
        except ValueError:
            messages = []

        message = ", ".join(messages) if messages else (response.reason or "Unknown error")
        logger.error(f"Shopify API error {response.status_code}: {message}")
        return ShopifyAPIError(message, status_code=response.status_code, errors=messages)

    def get(self, path: str, response_model: Type[M], params: Optional[Dict[str, Any]] = None) -> Optional[M]:
        return self._make_request("GET", path, response_model=response_model, params=params)

    def post(self, path: str, body: BaseModel, response_model: Type[M]) -> Optional[M]:
        return self._make_request("POST", path, body=body, response_model=response_model)

    def put(self, path: str, body: BaseModel, response_model: Type[M]) -> Optional[M]:
        return self._make_request("PUT", path, body=body, response_model=response_model)

    def delete(self, path: str) -> None:
        self._make_request("DELETE", path)
