"""Admin UI mounted on the main FastAPI application."""

from fastapi import FastAPI
from sqladmin import Admin

from quickshow.admin.auth import AdminAuth
from quickshow.admin.views import MovieAdmin, ShowAdmin
from quickshow.config import settings
from quickshow.database import engine


def setup_admin(app: FastAPI) -> Admin:
    """Attach the SQLAdmin views under ``/admin``."""
    auth = AdminAuth(secret_key=settings.admin_secret_key)
    admin = Admin(app, engine, authentication_backend=auth, title="QuickShow Admin")
    for view in [MovieAdmin, ShowAdmin]:
        admin.add_view(view)
    return admin
