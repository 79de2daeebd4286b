"""
Batch translation clients

Clients:
    - base: BatchTranslator interface shared by all clients
    - google: Google Cloud Translation v2 REST API
"""

from .base import BatchTranslator
from .google import GoogleTranslateClient

__all__ = [
    'BatchTranslator',
    'GoogleTranslateClient'
]
