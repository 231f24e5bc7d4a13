"""errvalue - an immutable error value carrying a single message."""

from importlib.metadata import PackageNotFoundError, version

from .core.value import ErrorValue, new

try:
    __version__ = version("errvalue")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "0.0.0"

__all__ = ["ErrorValue", "new", "__version__"]
