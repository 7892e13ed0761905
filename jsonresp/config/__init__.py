"""Configuration module."""

from jsonresp.config.settings import JsonRespSettings

__all__ = ["JsonRespSettings"]
