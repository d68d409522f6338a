"""Runtime engine version."""

from .main import b64hex

__version__ = b64hex.ENGINE_VERSION

__all__ = ["__version__"]
