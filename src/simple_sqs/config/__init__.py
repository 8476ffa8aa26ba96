"""
Package: config
Description: Environment-driven settings for simple-sqs.
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
