"""EduLog - record keeping core for a tutoring business.

This package contains the validated domain models (students, lessons and
their value objects) and the parsing layer that turns raw user input into
those models.
"""
__version__ = "0.1.0"
