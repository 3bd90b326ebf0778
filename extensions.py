"""
Flask extension instances for the Incident Reporting application

Extensions are created unbound here and attached to the app in create_app(),
so models, routes and services can import them without importing the app.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

db = SQLAlchemy()
csrf = CSRFProtect()
limiter = Limiter(key_func=get_remote_address)
