"""
Bionic: an Ionic-style CLI for Blazor projects

Prepares Blazor projects with an App.scss stylesheet, build hooks and
generators for pages, components and services.
"""

try:
    from importlib.metadata import version
    __version__ = version("bionic-cli")
except Exception:
    __version__ = "0.0.0"  # Fallback for development

__all__ = ["__version__"]
