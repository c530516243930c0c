#!/usr/bin/env python3
"""
Core Module for the booking contract suite

Shared plumbing used by the resource clients and the test layers.

COMPONENTS:
    - config/: Run configuration (BookerConfig, LoggingConfig, load_settings)
    - logger.py: Logger setup from LoggingConfig
    - service_client_base.py: Base class for the HTTP resource clients

USAGE:
    from core.config import load_settings
    from restful_booker import BookingClient

    config = load_settings()
    async with BookingClient(config) as bookings:
        response = await bookings.get_booking_ids()
"""
