"""
Service implementations for the Campaign Board system.

These services implement the business logic interfaces defined in
campaign_board.interfaces.services.
"""
