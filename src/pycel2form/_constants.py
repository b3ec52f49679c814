"""Default settings for form-name binding."""

DEFAULT_PARAMETER_NAME = "m"
"""Identifier standing for the bound object, as in ``m => m.Name``."""

DEFAULT_MAX_RECURSION_DEPTH = 100
"""Maximum parse tree visit recursion depth (CWE-674 prevention)."""
