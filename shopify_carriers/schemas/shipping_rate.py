# File: shopify_carriers/schemas/shipping_rate.py
"""
Payloads exchanged with a carrier service's callback URL.

Shopify POSTs a ShippingRateRequest to the callback URL at checkout and
expects a ShippingRateResponse back. This client never sends these itself;
they are here for whoever implements the callback endpoint.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional
from pydantic import AwareDatetime, BeforeValidator, ConfigDict, Field, PlainSerializer

from .base import BaseSchema

SHOPIFY_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"  # "2013-04-12 14:48:45 -0400"


def _parse_shopify_datetime(value):
    if isinstance(value, str):
        try:
            return datetime.strptime(value, SHOPIFY_DATETIME_FORMAT)
        except ValueError:
            return value  # let pydantic try ISO-8601
    return value


# Naive datetimes are rejected: the wire format always carries a UTC offset.
ShopifyDatetime = Annotated[
    AwareDatetime,
    BeforeValidator(_parse_shopify_datetime),
    PlainSerializer(lambda dt: dt.strftime(SHOPIFY_DATETIME_FORMAT), return_type=str, when_used="json"),
]


class ShippingRateAddress(BaseSchema):
    """
    The address3, fax, address_type and company_name fields are only filled by
    specific ActiveShipping providers. API-created carrier services only receive
    address1, address2, city, zip/postal_code, province and country; the rest
    arrive as null.
    """
    country: Optional[str] = None
    postal_code: Optional[str] = None
    province: Optional[str] = None
    city: Optional[str] = None
    name: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    address3: Optional[str] = None
    phone: Optional[str] = None
    fax: Optional[str] = None
    email: Optional[str] = None
    address_type: Optional[str] = None
    company_name: Optional[str] = None


class RateLineItem(BaseSchema):
    """One cart line in a rate request. Unknown keys are kept as extra fields."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    sku: Optional[str] = None
    quantity: Optional[int] = None
    grams: Optional[int] = None
    price: Optional[Decimal] = None  # minor currency units
    vendor: Optional[str] = None
    requires_shipping: Optional[bool] = None
    taxable: Optional[bool] = None
    fulfillment_service: Optional[str] = None
    properties: Optional[Dict[str, Any]] = None
    product_id: Optional[int] = None
    variant_id: Optional[int] = None


class ShippingRateQuery(BaseSchema):
    origin: ShippingRateAddress
    destination: ShippingRateAddress
    items: List[RateLineItem] = Field(default_factory=list)
    currency: Optional[str] = None
    locale: Optional[str] = None


class ShippingRateRequest(BaseSchema):
    rate: ShippingRateQuery


class ShippingRate(BaseSchema):
    """A single rate offered back to checkout. All fields without defaults are required by Shopify."""

    # Name customers see at checkout, e.g. "Expedited Mail".
    service_name: str

    # Description customers see at checkout, e.g. "Includes tracking and insurance".
    description: str

    # Unique code for the rate, e.g. "expedited_mail".
    service_code: str

    currency: str

    # Total price in the rate currency, in cents.
    # See https://github.com/Shopify/shipping-fulfillment-app/issues/15#issuecomment-725996936
    total_price: Decimal

    # Whether the customer must provide a phone number at checkout.
    phone_required: bool = False

    min_delivery_date: Optional[ShopifyDatetime] = None

    # Latest delivery date for the rate to still be valid.
    max_delivery_date: Optional[ShopifyDatetime] = None


class ShippingRateResponse(BaseSchema):
    rates: List[ShippingRate] = Field(default_factory=list)
