"""Shared helpers for the targa package."""
from .binary import IoBuffer, ByteOrder

__all__ = ['IoBuffer', 'ByteOrder']
