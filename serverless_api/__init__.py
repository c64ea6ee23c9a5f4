"""Serverless course and user API."""

__version__ = "1.0.0"
