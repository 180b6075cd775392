"""Portal clients."""

from .epms import EpmsPortal

__all__ = ["EpmsPortal"]
