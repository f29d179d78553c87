"""page-templates -- configuration-page template loader."""

__version__ = '0.1.0'
