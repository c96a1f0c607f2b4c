"""Package manager building blocks: repository indexes, package metadata, plugins, file helpers."""

__version__ = "0.0.1"