"""
tableview – paginated, filterable, sortable table viewer core.

Import path convention::

    from tableview.kernel.errors import TransportError
    from tableview.application.viewer import DataViewer
    from tableview.adapters.http import RemotePageFetcher
    from tableview.config import ViewerSettings, build_viewer
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
