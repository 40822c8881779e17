"""
Protocols shared by the engine, its adapters and its input sources
"""

from poong.core.interfaces.input import InputSourceProtocol
from poong.core.interfaces.physics import PhysicsBackend
from poong.core.interfaces.renderer import RendererProtocol

__all__ = ["InputSourceProtocol", "PhysicsBackend", "RendererProtocol"]
