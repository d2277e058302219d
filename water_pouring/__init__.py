from flask import Flask


def create_app(config=None):
    """Flask application factory."""
    app = Flask(__name__)

    # Defaults for /api/solve requests that do not set their own bounds
    app.config.setdefault('SOLVER_MAX_DEPTH', None)
    app.config.setdefault('SOLVER_MAX_STATES', 1_000_000)
    if config:
        app.config.update(config)

    # Register blueprints
    from water_pouring.main import main_bp
    app.register_blueprint(main_bp)

    return app
