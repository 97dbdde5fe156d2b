from flask_sqlalchemy import SQLAlchemy

# Shared database instance for the user store models
db = SQLAlchemy(session_options={"expire_on_commit": False})

__all__ = ["db"]
