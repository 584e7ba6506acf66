"""Configuration models for Variantbox."""

from .user import UserConfigData


__all__ = ["UserConfigData"]
