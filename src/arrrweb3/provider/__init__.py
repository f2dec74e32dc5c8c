"""
Provider - JSON-RPC transport layer for ARRRweb3.

Uses httpx's async client; no web framework or session pooling.
"""

from .http import EndpointConfig, HttpProvider

__all__ = ["EndpointConfig", "HttpProvider"]
