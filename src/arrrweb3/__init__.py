"""
ARRRweb3 - Async Python client for the Pirate Chain daemon JSON-RPC API.
"""
__all__ = [
    # Client
    "ARRRweb3",
    # Transport
    "EndpointConfig",
    "HttpProvider",
    # Errors
    "ARRRweb3Error",
    "ConfigError",
    "DecodeError",
    "HttpStatusError",
    "NetworkError",
    "RpcError",
    # Helpers
    "utils",
]

from . import utils
from .client import ARRRweb3
from .errors import (
    ARRRweb3Error,
    ConfigError,
    DecodeError,
    HttpStatusError,
    NetworkError,
    RpcError,
)
from .provider import EndpointConfig, HttpProvider
