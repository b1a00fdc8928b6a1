"""Data models for media catalog."""

from .config import Config

__all__ = ["Config"]
