"""Runnable examples of creational and structural design patterns."""

__version__ = "0.1.0"

__all__ = [
    "abstract_factory",
    "builder",
    "factory_method",
    "prototype",
    "singleton",
    "adapter",
    "bridge",
]