"""Helpers rendering boolean HTML attributes inside templates."""

from __future__ import annotations


def ternary(condition: bool, when_true: str, when_false: str = "") -> str:
    """Render ``when_true`` if ``condition`` holds, else ``when_false``."""
    return when_true if condition else when_false


def attribute(condition: bool, token: str) -> str:
    """Conditionally render a bare attribute token."""
    return ternary(condition, token)


def checked(condition: bool) -> str:
    """Conditionally bind the 'checked' property."""
    return attribute(condition, "checked")


def selected(condition: bool) -> str:
    """Conditionally bind the 'selected' property."""
    return attribute(condition, "selected")


def readonly(condition: bool) -> str:
    """Conditionally bind the 'readonly' property."""
    return attribute(condition, "readonly")


def disabled(condition: bool) -> str:
    """Conditionally bind the 'disabled' property."""
    return attribute(condition, "disabled")
