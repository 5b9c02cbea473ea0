from typing import Any, List, Optional


class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class PlatformServiceError(BaseServiceError):
    """Base exception for platform service errors."""
    pass

class ShopifyServiceError(PlatformServiceError):
    """Base exception for Shopify-specific errors."""
    pass

class ShopifyAPIError(ShopifyServiceError):
    """Raised when Shopify API calls fail."""

    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[List[str]] = None):
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.status_code} {self.message}"
        return self.message

class ShopifyDecodeError(ShopifyAPIError):
    """Raised when a Shopify response body cannot be decoded."""
    pass


def extract_error_messages(body: Any) -> List[str]:
    """
    Pull error messages out of a Shopify error body.

    Shopify uses several shapes:
        {"errors": "Not Found"}
        {"errors": {"name": ["can't be blank"]}}
        {"errors": ["first", "second"]}
        {"error": "invalid_request"}
    """
    if not isinstance(body, dict):
        return []

    errors = body.get("errors", body.get("error"))
    if errors is None:
        return []
    if isinstance(errors, str):
        return [errors]
    if isinstance(errors, list):
        return [str(e) for e in errors]
    if isinstance(errors, dict):
        messages = []
        for field, value in errors.items():
            values = value if isinstance(value, list) else [value]
            messages.extend(f"{field}: {v}" for v in values)
        return sorted(messages)
    return [str(errors)]
