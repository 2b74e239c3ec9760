"""
Plugins module - DSP unit type registry.
"""

from .registry import PluginRegistry

__all__ = [
    "PluginRegistry",
]
