"""
Adapters for external systems and services.

These adapters implement the interfaces defined in campaign_board.interfaces
and provide concrete implementations for interacting with external systems.
"""
