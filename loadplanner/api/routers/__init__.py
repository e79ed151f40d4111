"""API routers."""

from . import aircraft, catalog, planning

__all__ = ["aircraft", "catalog", "planning"]
