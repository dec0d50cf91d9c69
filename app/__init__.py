"""Media Channel Registry.

This package contains the FastAPI service that manages media channels
(social media accounts identified by title and username) for the
publication scheduling platform. State lives in PostgreSQL.
"""
