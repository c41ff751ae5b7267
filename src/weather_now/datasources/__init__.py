"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, URL building
    ├── query.py          # Input normalization (optional)
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions use the shared session from ``services/http.py``, raise
``weather_now.errors`` exceptions, and return pydantic models from
``weather_now.schemas``.
"""
