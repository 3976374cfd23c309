"""
Domain Layer - Pure Business Logic

This layer contains:
- Value Objects: Immutable, validated objects without identity
- Entities: Agencies, properties, clients, bookings and deals
- Services: Domain logic that spans several aggregates

No external dependencies allowed in this layer.
"""
