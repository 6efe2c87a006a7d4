"""
Boundary layer for external system integrations.

Handles all interactions with external systems (the relational database).
Provides adapters and clients for infrastructure dependencies.
"""
