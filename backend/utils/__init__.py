"""
Utility functions and decorators.
"""

from .error_handlers import add_error_handlers, handle_api_errors

__all__ = ["add_error_handlers", "handle_api_errors"]
