from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import health
from . import auth
from . import sections
from . import content
from . import categories
from . import settings
from . import assets
from . import audit
