"""
tests.vehicle_daemon

Test suite for the vehicle_daemon package of options2api.

This package contains unit tests for the components of the daemon, including
API endpoints, configuration handling, application state, charge control,
the vehicle API client and model validation.
"""
