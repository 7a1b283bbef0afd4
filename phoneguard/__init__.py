"""PhoneGuard content layer: Contentstack queries with mock-data fallback."""

__version__ = "0.1.0"
