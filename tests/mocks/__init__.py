class MockData:
    """Mock data for testing"""
    @staticmethod
    def get_carrier_service():
        return {
            "id": 1,
            "name": "Shipping Rate Provider",
            "active": True,
            "service_discovery": True,
            "carrier_service_type": "api",
            "admin_graphql_api_id": "gid://shopify/DeliveryCarrierService/1",
            "format": "json",
            "callback_url": "https://fooshop.example.com/shipping"
        }

    @staticmethod
    def get_rate_request():
        return {
            "rate": {
                "origin": {
                    "country": "CA",
                    "postal_code": "K2P1L4",
                    "province": "ON",
                    "city": "Ottawa",
                    "name": None,
                    "address1": "150 Elgin St.",
                    "address2": "",
                    "address3": None,
                    "phone": None,
                    "fax": None,
                    "email": None,
                    "address_type": None,
                    "company_name": "Jamie D's Emporium"
                },
                "destination": {
                    "country": "CA",
                    "postal_code": "K1M1M4",
                    "province": "ON",
                    "city": "Ottawa",
                    "name": "Bob Norman",
                    "address1": "24 Sussex Dr.",
                    "address2": "",
                    "address3": None,
                    "phone": None,
                    "fax": None,
                    "email": None,
                    "address_type": None,
                    "company_name": None
                },
                "items": [
                    {
                        "name": "Short Sleeve T-Shirt",
                        "sku": "",
                        "quantity": 1,
                        "grams": 1000,
                        "price": 1999,
                        "vendor": "Jamie D's Emporium",
                        "requires_shipping": True,
                        "taxable": True,
                        "fulfillment_service": "manual",
                        "properties": None,
                        "product_id": 48447225880,
                        "variant_id": 258644705304
                    }
                ],
                "currency": "USD",
                "locale": "en"
            }
        }
