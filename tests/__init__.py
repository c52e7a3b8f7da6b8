"""
tests

Test suite for the options2api project.

This package contains unit and integration tests for all components of the
options2api project, including the option decoder library and the daemon.

Subpackages:
    - vehicle_daemon: Tests for the FastAPI backend, charge control and vehicle API client
    - integration: End-to-end tests through the HTTP API
"""
