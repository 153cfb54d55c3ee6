"""Cloud Technologies API: Google Cloud AI demos with offline fallbacks."""

__version__ = '1.0.0'
