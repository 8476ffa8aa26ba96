"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: Structured logging configuration and helpers
- ids: Random batch entry ids
- batch_helpers: Batch validation and entry builders
- polling: Purge-completion poller
"""

__all__ = []
