"""Projects API Python SDK Package."""

__version__ = "1.0.0"
__description__ = (
    "Client for the Projects REST API with token-based pagination"
)

__all__ = ["core", "resources", "projectv1"]
