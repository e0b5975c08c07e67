"""
Boundary layer for external system integrations.

Handles all interactions with external systems (relational store, object storage, code sandbox,
identity provider, speech-to-text).
Provides adapters and clients for infrastructure dependencies.
"""
