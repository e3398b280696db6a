"""
Adapters package for the Gateway Service.

Contains the HTTP client wrapper for the downstream application registry.
The adapter encapsulates:

- The base URL, timeouts and request shapes
- Path-segment encoding of path parameters
- Collapsing transport faults into a single failure outcome

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .registry_client import RegistryClient, build_backend_path, create_http_client

__all__ = [
    "RegistryClient",
    "build_backend_path",
    "create_http_client",
]
