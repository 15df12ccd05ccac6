"""WSGI entry point: ``flask --app app run``."""

from src.admin_dashboard.admin_dashboard.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config.get("DEBUG", False))
