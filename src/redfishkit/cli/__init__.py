"""redfishkit command line interface."""

from redfishkit import __version__

__all__ = ['__version__']
