"""
Error types raised by the ARRRweb3 client.

Every failure of a daemon call surfaces as one of the subclasses below so
callers can tell a dead connection from an HTTP failure, a garbled body,
or an error reported by the daemon itself.
"""

from __future__ import annotations

import json
from typing import Any, Optional


class ARRRweb3Error(RuntimeError):
    exit_code: int = 1


class NetworkError(ARRRweb3Error):
    exit_code = 2


class HttpStatusError(ARRRweb3Error):
    exit_code = 3

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body
        self.rpc_code: Optional[int] = None
        self.rpc_message: Optional[str] = None

        # bitcoind-derived daemons report RPC failures as HTTP 500 with a JSON error body
        try:
            data = json.loads(body)
        except ValueError:
            return
        error = data.get("error") if isinstance(data, dict) else None
        if isinstance(error, dict):
            self.rpc_code = error.get("code")
            self.rpc_message = error.get("message")


class DecodeError(ARRRweb3Error):
    exit_code = 4

    def __init__(self, message: str, *, body: Optional[str] = None):
        super().__init__(message)
        self.body = body


class RpcError(ARRRweb3Error):
    exit_code = 5

    def __init__(self, code: Optional[int], message: str, *, data: Any = None):
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data


class ConfigError(ARRRweb3Error, ValueError):
    exit_code = 1
