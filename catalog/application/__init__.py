"""
Application layer.

This layer contains:
- Protocols: Ports that infrastructure adapters implement

The application layer depends only on the domain layer.
"""
