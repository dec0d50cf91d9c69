"""
Test fixtures package.

This package provides reusable pytest fixtures for testing the channel
registry. Import fixtures into conftest.py to make them available to all tests.

Available fixture modules:
- database: Channel store fixtures (mocked and SQLite-backed) and an HTTP client
"""
