"""Operation registry for arithmetic between measures.

Exports:
    OperationRegistry: Append-only name to function mapping with listeners
    OperationFn: Type alias for binary operations
    Listener: Type alias for registration callbacks
    create_default_operations: Registry seeded with the basic operations
    operations: Process-wide registry used by Measure
"""

from .operation_basic import register_basic_operations
from .operation_registry import Listener, OperationFn, OperationRegistry


def create_default_operations() -> OperationRegistry:
    """Build a registry with add, subtract, multiply and divide."""
    registry = OperationRegistry()
    register_basic_operations(registry)
    return registry


operations = create_default_operations()

__all__ = [
    "OperationRegistry",
    "OperationFn",
    "Listener",
    "create_default_operations",
    "register_basic_operations",
    "operations",
]
