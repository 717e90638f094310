"""
Synthetic live capture subsystem.
"""

from .config import CaptureConfig
from .event_factory import EventFactory
from .event_buffer import EventBuffer
from .interfaces import InterfaceRegistry
from .scheduler import CaptureClock
from .session import CaptureSession, SessionSnapshot

__all__ = [
    'CaptureConfig',
    'EventFactory',
    'EventBuffer',
    'InterfaceRegistry',
    'CaptureClock',
    'CaptureSession',
    'SessionSnapshot',
]
