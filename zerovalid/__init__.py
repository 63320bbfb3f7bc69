"""Declarative, translatable validation rules for objects, with field-name strategies and code-generation models."""

__version__ = "0.1.0"