"""
Shared utilities package.

This package contains logging configuration used across the application.
"""

from app.utils.logging_config import setup_logging, configure_api_logging

__all__ = ['setup_logging', 'configure_api_logging']
