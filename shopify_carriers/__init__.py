"""Shopify carrier service client."""

__version__ = "0.1.0"
