"""
Test suite for the fire effect.

Run tests with:
    pytest tests/
    pytest tests/ -v
"""
