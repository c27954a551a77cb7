"""
Quote Service Test Suite
========================

- Unit tests for the quote store, utilities and API routes
- Integration tests for the assembled application
"""
