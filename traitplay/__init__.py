"""Polymorphism exercises: map-like views, reward objects and a demo command."""

__version__ = "0.1.0"