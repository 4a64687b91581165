"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, GET + cache helper
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions validate their arguments (see :mod:`pydopa.validation` and
:mod:`pydopa.resolve`), call the client, and return normalized tables built
by :func:`pydopa.tables.normalize_records`.
"""
