"""Infrastructure layer — driver files, credentials, registry HTTP client.

This layer depends on stdlib, pydantic, and httpx. It may import domain
models but must never import from services, commands, or output.
"""
