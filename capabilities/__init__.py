"""Runtime capability probing for a tenant execution context"""
from .context import CapabilityContext

__all__ = [
    'CapabilityContext',
]
