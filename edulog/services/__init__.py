"""Application services built on the domain layer."""
