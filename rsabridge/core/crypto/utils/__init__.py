"""Shared utilities for the crypto module."""
from .encoding import TextEncoder, HexEncoder, Base64Encoder, OutputEncoding

__all__ = [
    'TextEncoder',
    'HexEncoder',
    'Base64Encoder',
    'OutputEncoding',
]
