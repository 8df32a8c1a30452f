"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: One orchestration class per operation (add, pay, balance, expired)
- Ports: Abstract interfaces for storage, clock and locking
- Service: Facade exposing the use cases on plain values

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
