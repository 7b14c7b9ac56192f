"""
Context-specific RSA key derivation.
"""
from .context_key_deriver import ContextKeyDeriver

__all__ = [
    'ContextKeyDeriver',
]
