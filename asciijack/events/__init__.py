"""
Event system for the asciijack engine.
"""

from asciijack.events.emitter import EventEmitter, EventBus, EngineEventType

__all__ = ["EventEmitter", "EventBus", "EngineEventType"]
