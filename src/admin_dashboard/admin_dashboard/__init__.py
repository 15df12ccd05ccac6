"""Admin Dashboard package.

This package is organized by feature modules (employees, break schedules,
survey users, news, quarterly NPS) with a thin Flask controller layer and
service/repository layers over a single SQLAlchemy store handle.
"""
