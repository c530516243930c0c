"""
Shared Test Fixtures

Generators used across all test layers. Booking payload factories live
with the booking contracts in tests/contracts/booking.

Structure:
    - generators.py: Random data and unique name generators
    - runner.py: BookerConfig workers/retries as xdist and rerun options
"""

# Random generators
from .generators import (
    random_string,
    random_names,
    unique_suffix,
    unique_name,
)

# Runner settings
from .runner import apply_reruns, apply_workers
