"""Inspecting and removing Strategic Claude Basic installations, with layout constants, errors and data models."""

__version__ = "0.1.0"
__all__ = ["cleaner", "config", "errors", "install_config", "models"]