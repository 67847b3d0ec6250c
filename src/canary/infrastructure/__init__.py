"""Infrastructure layer - External dependencies and implementations.

This layer contains the adapters to external collaborators:
- Error handlers halting the request
- Persistence loader (SQLAlchemy)
- Request pipeline integration (FastAPI)
"""
