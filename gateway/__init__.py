"""
Gateway Service - single entry point for the MLB directories

Responsibilities:
- Proxy player and team lookups to their directories unchanged
- Compose the team roster view from both directories
- Document the client-facing contract (OpenAPI)
"""
