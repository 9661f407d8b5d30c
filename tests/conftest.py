"""Pytest configuration and shared fixtures."""
import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest

from edulog.domain.student import Address, Email, Name, Phone, Student
from edulog.domain.tag import Tag


@pytest.fixture
def alice_fields():
    """Validated fields for a sample student."""
    return {
        "name": Name("Alice Pauline"),
        "phone": Phone("94351253"),
        "email": Email("alice@example.com"),
        "address": Address("123, Jurong West Ave 6, #08-111"),
        "tags": {Tag("sec3"), Tag("weekend")},
    }


@pytest.fixture
def alice(alice_fields):
    """Sample student, not yet marked present."""
    return Student(**alice_fields)


@pytest.fixture
def bob():
    """A second student with no tags."""
    return Student(
        Name("Bob Choo"),
        Phone("22222222"),
        Email("bob@example.com"),
        Address("Block 123, Bobby Street 3"),
        set(),
    )
