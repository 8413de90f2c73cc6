"""Exception types for the catalog reconciliation tool."""


class CatalogReconcileError(Exception):
    """Base class for all errors raised by catalog_reconcile."""


class ConfigurationError(CatalogReconcileError):
    """Raised when configuration values are missing or invalid."""


class CatalogBuildError(CatalogReconcileError):
    """Raised when an export file cannot be turned into a catalog."""


class RemapError(CatalogReconcileError):
    """Raised when an identifier remap cannot be applied.

    A stale remap table entry must abort the run instead of being skipped.
    """


class ReconciliationError(CatalogReconcileError):
    """Raised when a comparison is requested with inconsistent inputs."""
