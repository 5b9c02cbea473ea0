"""
Schema exports.
"""

from .base import BaseSchema

from .carrier import (
    CarrierResource,
    SingleCarrierResource,
    ListCarrierResource,
)
from .shipping_rate import (
    ShippingRateAddress,
    RateLineItem,
    ShippingRateQuery,
    ShippingRateRequest,
    ShippingRate,
    ShippingRateResponse,
)
