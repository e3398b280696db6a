"""
API Gateway Service package for the application registry.

The gateway gives clients a stable entry point in front of one backend
registry service. It forwards read requests verbatim and substitutes a fixed
error payload when the backend cannot be reached.

Structure:
- app.main: FastAPI app, route table and request handlers.
- app.adapters: HTTP client for the backend registry.
- app.domain: Search query construction, call outcomes and fallback payload.
"""
