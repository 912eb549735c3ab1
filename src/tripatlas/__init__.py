"""Tripatlas - photo album suggestions and great-circle flight animation for travel journals."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("tripatlas")
except PackageNotFoundError:
    # Fallback for development without installation
    __version__ = "0.0.0-dev"
