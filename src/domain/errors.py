"""Errors raised by catalog adapters. The domain itself never raises."""


class CatalogError(Exception):
    """Base class for catalog file failures."""


class CatalogReadError(CatalogError):
    """The catalog file could not be opened or decoded."""


class CatalogWriteError(CatalogError):
    """The setlist snapshot could not be appended to the catalog file."""
