"""Infrastructure layer — vault filesystem, template lookup, editor opener.

This layer depends on stdlib and third-party libs (Jinja2).
The service layer bridges between domain logic and infrastructure.
"""
