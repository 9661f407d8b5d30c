"""Domain layer - business entities and value objects.

This package contains the core domain models and validation rules
that are independent of storage and presentation.
"""
