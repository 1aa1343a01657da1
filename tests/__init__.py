"""
Unit Tests for Simtic

This package contains unit tests for all engine components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_search.py

    # Run with coverage
    pytest tests/ --cov=simtic --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestMinimax::test_empty_board_is_a_draw

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
