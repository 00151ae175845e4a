"""Suite module - test plan building blocks."""

from .schema import ScopeCallable, TestCase, TestScope

__all__ = [
    "ScopeCallable",
    "TestCase",
    "TestScope",
]
