from .client import RestTransport, ShopifyRestClient, shop_full_name
from .carrier import CarrierServiceClient, CARRIER_BASE_PATH
