"""
Pytest configuration file for tests.

Puts the project root on sys.path and resets the package logger level
between tests.
"""

import sys
import os
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def pytest_configure(config):
    """Called after command line options have been parsed and all plugins loaded."""
    from discordrest.logging_config import get_logger

    # Attach the package handler before any test module imports the builder
    get_logger()


def pytest_runtest_teardown(item):
    """Restore the default package log level after each test."""
    logging.getLogger("discordrest").setLevel(logging.INFO)
