"""
FastAPI routers for the jparser demo service.

Each module defines a router; request bodies are decoded with json_body().
"""
