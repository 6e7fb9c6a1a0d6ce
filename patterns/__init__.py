"""Reusable patterns for building small service verticals.

Each module demonstrates a self-contained pattern that can be adapted
to any domain: rules engines, in-memory repositories, and domain
configuration.
"""
