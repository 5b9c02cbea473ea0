# File: shopify_carriers/schemas/carrier.py
"""
Carrier service resources and the envelopes Shopify wraps them in.

See: https://shopify.dev/docs/admin-api/rest/reference/shipping-and-fulfillment/carrierservice
"""

from typing import List, Optional
from pydantic import Field

from .base import BaseSchema


class CarrierResource(BaseSchema):
    """A Shopify carrier service. Every field is optional so partial updates omit what is unset."""

    # Whether this carrier service is active.
    active: Optional[bool] = None

    # Public URL Shopify calls to retrieve shipping rates.
    callback_url: Optional[str] = None

    # Distinguishes between API or legacy carrier services.
    carrier_service_type: Optional[str] = None

    id: Optional[int] = None

    # Format of the data returned by the callback: json or xml. Shopify defaults to json.
    format: Optional[str] = None

    # Name of the shipping service as seen by merchants and their customers.
    name: Optional[str] = None

    # Whether merchants can send dummy data to the service from the admin to preview rates.
    service_discovery: Optional[bool] = None

    admin_graphql_api_id: Optional[str] = None


class SingleCarrierResource(BaseSchema):
    carrier_service: Optional[CarrierResource] = None


class ListCarrierResource(BaseSchema):
    carrier_services: List[CarrierResource] = Field(default_factory=list)
