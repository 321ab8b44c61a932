"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch functions returning frames or a ClimaBundle

Fetch functions use the shared session from ``late_frost.services.http``
and let ``requests`` errors propagate; retries happen in the session.
"""
