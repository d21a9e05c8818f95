"""
Infrastructure layer.

Concrete adapters implementing the application layer's protocols.
"""
