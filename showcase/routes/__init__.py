"""
Application routes package.

Contains all demonstration blueprints.
"""

from showcase.routes.basics import basics_bp
from showcase.routes.files import files_bp
from showcase.routes.forms import forms_bp
from showcase.routes.groups import ROUTE_GROUPS, create_group_blueprint
from showcase.routes.users import users_bp
from showcase.routes.views import views_bp

__all__ = [
    "ROUTE_GROUPS",
    "basics_bp",
    "create_group_blueprint",
    "files_bp",
    "forms_bp",
    "users_bp",
    "views_bp",
]
