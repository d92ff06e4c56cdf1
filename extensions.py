from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Extensions are created unbound and attached in create_app()

# Slot table for the record store
db = SQLAlchemy()

# Access control over the session pointer
login_manager = LoginManager()
