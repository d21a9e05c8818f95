"""
Category bounded context.

Aggregates used to group catalog items.
"""
