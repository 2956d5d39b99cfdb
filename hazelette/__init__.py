"""Core of a small event-driven game engine: events, logging, a pygame window and an application loop."""

__version__ = "0.1.0"
__all__ = ["application", "events", "log", "sandbox", "window"]