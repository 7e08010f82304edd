"""
Narration
---------

Ordered provider list (cloud first, local template last) and the fallback
chain that walks it.
"""

from .base import NarrationProvider
from .cloud_provider import CloudNarrationProvider
from .template_provider import TemplateNarrationProvider
from .chain import NarrationFallbackChain

__all__ = [
    "NarrationProvider",
    "CloudNarrationProvider",
    "TemplateNarrationProvider",
    "NarrationFallbackChain",
]
