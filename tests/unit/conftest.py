"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── golden/booking_service/   Factory, contracts, validators
    └── test_*.py                 Config, client models, generators

Usage:
    pytest tests/unit -v                 # All unit tests
    pytest tests/unit/golden -v          # Only golden tests
    pytest tests/unit -m golden -v       # By marker
"""
import os
import random
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.contracts.booking import BookingTestDataFactory


@pytest.fixture
def seeded_factory() -> BookingTestDataFactory:
    """Factory with a fixed seed so failures reproduce"""
    return BookingTestDataFactory(rng=random.Random(1234))
