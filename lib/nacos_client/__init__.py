from .client import NacosClient
from .config_types import ClientConfig
from .errors import NacosClientError, TransportError
from .fingerprint import fingerprint

__all__ = ["NacosClient", "ClientConfig", "NacosClientError", "TransportError", "fingerprint"]
