"""
Base controller class.
Controllers sit between the endpoints and the services: they return response
schemas, or None when the addressed record does not exist so the endpoint
can answer 404.
"""

from abc import ABC


class BaseController(ABC):
    """Base class for the API controllers."""
