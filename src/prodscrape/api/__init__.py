"""
Flask API for prodscrape.
"""
from .app import create_app

__all__ = ["create_app"]
