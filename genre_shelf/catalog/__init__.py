"""
Catalog package for the book catalog API.

``filters`` holds the genre filter itself; ``store`` keeps the
in-memory collection it runs over, and ``router`` exposes both
under ``/api/catalog``. Only the filter is re-exported here, so
importing it never pulls in FastAPI or reads the sample data.
"""

from .filters import filter_by_genre  # noqa: F401
