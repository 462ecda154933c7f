"""
Credential helpers for employee login.
"""

from .pin import hash_pin

__all__ = ["hash_pin"]
