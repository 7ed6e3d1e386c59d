"""
Abstract interfaces for the Campaign Board system.

These interfaces define the contracts that concrete implementations
must adhere to, following the Dependency Inversion Principle.

This package contains:
- Repository interfaces for project and identity data
- Provider interfaces for storage adapters
- Service interfaces for the submission and moderation workflow
"""
