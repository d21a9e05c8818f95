"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on persistence or delivery frameworks.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Validation: Rule-sets that entities enforce on themselves
"""
