"""bootconf - load a JSON config file named by -config into your dataclasses"""

__version__ = "1.0.0"
__description__ = "Load a JSON config file named by -config into your dataclasses"

__all__ = [
    "BootContext",
    "ConfigError",
    "ConfigLoader",
    "ErrorKind",
    "__version__",
    "main",
]


def __getattr__(name: str):
    """Lazy import so ``import bootconf`` never touches argv or .env files."""
    if name == "BootContext":
        from .core.context import BootContext

        return BootContext
    if name == "ConfigLoader":
        from .core.loader import ConfigLoader

        return ConfigLoader
    if name in ("ConfigError", "ErrorKind"):
        from .core import errors

        return getattr(errors, name)
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
