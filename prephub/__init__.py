"""PrepHub quiz backend.

``prephub.app`` resolves to the FastAPI application on first access, so
the seed script and the scoring modules import without building it.
"""

__all__ = ["app"]


def __getattr__(name):
    if name != "app":
        raise AttributeError(f"module 'prephub' has no attribute {name!r}")
    from prephub.main import app

    return app
