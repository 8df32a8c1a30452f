"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Objects with identity and lifecycle (e.g., StudentFeeAccount, Fee)
- Value Objects: Immutable objects defined by their attributes (e.g., Amount, FeeId)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
