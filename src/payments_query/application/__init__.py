"""Application layer - Query services and port definitions.

This layer contains:
- Services: The payment query service
- Ports: Abstract interfaces for the payment source and the clock
- DTOs: Flat views of query results for presentation

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
