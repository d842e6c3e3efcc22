"""linetint: highlight success/failure keywords in a command's output."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("linetint")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
