"""Turn version-control webhooks into CI build trigger requests."""

__version__ = "0.1.0"
