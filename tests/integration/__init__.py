"""
tests.integration

Integration test suite for the options2api project.

This package contains end-to-end tests that verify the components working
together: API endpoints, option decoding, application state and the vehicle
API client.
"""
