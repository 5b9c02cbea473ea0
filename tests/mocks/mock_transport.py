from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class MockTransport:
    """In-memory stand-in for ShopifyRestClient that records every call"""

    def __init__(self, responses: Optional[Dict[tuple, Any]] = None):
        self.responses = responses or {}  # (method, path) -> decoded JSON body
        self.calls: List[Dict[str, Any]] = []
        self.error: Optional[Exception] = None  # raised by every call when set

    def _respond(self, method: str, path: str, response_model=None, body: Optional[BaseModel] = None, params=None):
        self.calls.append({'method': method, 'path': path, 'body': body, 'params': params})
        if self.error is not None:
            raise self.error
        data = self.responses.get((method, path))
        if response_model is None or data is None:
            return None
        return response_model.model_validate(data)

    def get(self, path, response_model, params=None):
        return self._respond("GET", path, response_model, params=params)

    def post(self, path, body, response_model):
        return self._respond("POST", path, response_model, body=body)

    def put(self, path, body, response_model):
        return self._respond("PUT", path, response_model, body=body)

    def delete(self, path):
        self._respond("DELETE", path)
