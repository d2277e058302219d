from flask import Blueprint

main_bp = Blueprint('main', __name__)

from water_pouring.main import routes
