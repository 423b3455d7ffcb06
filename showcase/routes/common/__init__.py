"""
Common utilities for route handlers.

Provides shared functionality to reduce code duplication:
- Body binding
- Error handlers
- Rate limiting utilities
- Response formatting
"""
