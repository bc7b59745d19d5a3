"""
API - Flask application exposing the brief generator over HTTP.
"""

from .app import create_app, API_PREFIX

__all__ = [
    'create_app',
    'API_PREFIX',
]
