"""
Boundary layer for external system integrations.

Handles interactions with external HTTP APIs (GitHub).
"""
