"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each entity kind (users, pets, appointments, ...) has its
own schema module, service and router in ``api/v1/endpoints``.
Persistence lives in ``repositories`` and shared infrastructure
(configuration, logging, database, errors) in ``core``.
"""

from .main import app  # noqa: F401
