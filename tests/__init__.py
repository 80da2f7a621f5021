#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Run only the scorer unit tests
    python -m pytest tests/unit/core/scorer -v

    # Using unittest
    python -m unittest discover tests -v

Shared team/opportunity records live in tests/fixtures/liftout_fixtures.py.
"""
