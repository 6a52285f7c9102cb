from catalog_client_sdk.auth_store import DEFAULT_TOKEN_KEY, AuthStore
from catalog_client_sdk.config import SDKConfig
from catalog_client_sdk.errors import ApiError
from catalog_client_sdk.http_client import HttpClient
from catalog_client_sdk.resources_client import ResourceClient
from catalog_client_sdk.session import SessionContext

__all__ = [
    "SDKConfig",
    "ApiError",
    "HttpClient",
    "AuthStore",
    "DEFAULT_TOKEN_KEY",
    "SessionContext",
    "ResourceClient",
]
