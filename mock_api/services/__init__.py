# mock_api/services/__init__.py
from mock_api.services.lookup_client import LookupClient

__all__ = ["LookupClient"]
