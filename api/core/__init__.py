"""
Core utilities shared across the users API.

This package hosts configuration helpers, logging setup and the response
envelope used by every router.
"""
