from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager
from flask_cors import CORS

from .assets import CloudinaryAssetStore

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
cors = CORS()
asset_store = CloudinaryAssetStore()
