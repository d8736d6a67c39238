"""JSPEC portfolio site: project loading and video viewer."""

__version__ = "0.1.0"
