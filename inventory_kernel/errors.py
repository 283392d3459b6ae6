"""Inventory Kernel exceptions."""


class InventoryKernelError(Exception):
    """Base exception for the inventory kernel."""


class ItemNotFoundError(InventoryKernelError):
    """Raised when a query that requires a match finds nothing."""


class SnapshotError(InventoryKernelError):
    """Raised when a container snapshot would violate its slot invariants."""
