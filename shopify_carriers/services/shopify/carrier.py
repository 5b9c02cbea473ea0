# shopify_carriers.services.shopify.carrier

import logging
from typing import List, Optional

from shopify_carriers.schemas.carrier import CarrierResource, ListCarrierResource, SingleCarrierResource
from shopify_carriers.services.shopify.client import RestTransport

logger = logging.getLogger(__name__)

CARRIER_BASE_PATH = "carrier_services"


class CarrierServiceClient:
    """
    Carrier service endpoints of the Shopify Admin REST API.

    Each method is a single request through the injected transport. Transport
    and decoding errors propagate unchanged.

    Documentation: https://shopify.dev/docs/admin-api/rest/reference/shipping-and-fulfillment/carrierservice
    """

    def __init__(self, client: RestTransport):
        self.client = client

    @staticmethod
    def _collection_path() -> str:
        return f"{CARRIER_BASE_PATH}.json"

    @staticmethod
    def _item_path(carrier_id: int) -> str:
        return f"{CARRIER_BASE_PATH}/{carrier_id}.json"

    def list(self) -> List[CarrierResource]:
        """List carrier services in the order Shopify returns them"""
        resource = self.client.get(self._collection_path(), ListCarrierResource, None)
        return list(resource.carrier_services) if resource else []

    def get(self, carrier_id: int) -> Optional[CarrierResource]:
        """Get a carrier service by ID"""
        resource = self.client.get(self._item_path(carrier_id), SingleCarrierResource, None)
        return resource.carrier_service if resource else None

    def create(self, carrier: CarrierResource) -> Optional[CarrierResource]:
        """Create a carrier service; Shopify assigns the ID"""
        body = SingleCarrierResource(carrier_service=carrier)
        resource = self.client.post(self._collection_path(), body, SingleCarrierResource)
        if resource and resource.carrier_service:
            logger.info(f"Created carrier service {resource.carrier_service.id} ({resource.carrier_service.name})")
        return resource.carrier_service if resource else None

    def update(self, carrier: CarrierResource) -> Optional[CarrierResource]:
        """Update a carrier service. The path is built from carrier.id."""
        if carrier.id is None:
            raise ValueError("carrier.id is required to update a carrier service")

        body = SingleCarrierResource(carrier_service=carrier)
        resource = self.client.put(self._item_path(carrier.id), body, SingleCarrierResource)
        logger.info(f"Updated carrier service {carrier.id}")
        return resource.carrier_service if resource else None

    def delete(self, carrier_id: int) -> None:
        """Delete a carrier service"""
        self.client.delete(self._item_path(carrier_id))
        logger.info(f"Deleted carrier service {carrier_id}")
