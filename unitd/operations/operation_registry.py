"""Registry of named binary operations with registration listeners.

An operation is a pure function of two magnitudes already expressed in a
common scale, for example ``add(a, b) = a + b``. The registry is
append-only. Each successful registration is announced to every
subscribed listener, which is how Measure mounts new operations as methods.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import threading

from unitd.config import Number
from unitd.errors import DuplicateRegistrationError, UnresolvableOperationError

logger = logging.getLogger(__name__)

OperationFn = Callable[[Number, Number], Number]
"""Type alias for binary operations over raw magnitudes."""

Listener = Callable[[str, OperationFn], None]
"""Type alias for registration listeners, called with ``(name, fn)``."""


class OperationRegistry:
    """Append-only mapping from operation name to binary function.

    Registration stores the operation and then notifies every listener,
    exactly once and before :meth:`register` returns. Listeners only see
    registrations made after they subscribed. Registration and
    notification run under a re-entrant lock, so listeners may read the
    registry.

    Attributes:
        _ops: Mapping from name to operation function.
        _listeners: Subscribed callbacks in subscription order.
        _lock: Serializes registration and notification.
    """

    def __init__(self):
        self._ops: dict[str, OperationFn] = {}
        self._scale_powers: dict[str, int] = {}
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    def register(self, name: str, fn: OperationFn, scale_power: int = 1) -> None:
        """Register a binary operation and notify listeners.

        Args:
            name: Operation name, unique within the registry.
            fn: Function of two numbers returning a number.
            scale_power: Power of the unit scale carried by the result.
                1 for additive operations (the result is a magnitude of the
                operand unit), 2 for products, 0 for ratios.

        Raises:
            DuplicateRegistrationError: If ``name`` is already registered.
            TypeError: If ``fn`` is not callable.
        """
        if not callable(fn):
            msg = f"Operation [{name}] must be callable, found [{fn!r}]"
            raise TypeError(msg)
        with self._lock:
            if name in self._ops:
                msg = f"Operation [{name}] is already registered"
                raise DuplicateRegistrationError(msg)
            self._ops[name] = fn
            self._scale_powers[name] = scale_power
            logger.debug("Registered operation [%s] scale_power=%d", name, scale_power)
            for listener in list(self._listeners):
                listener(name, fn)

    def on_register(self, listener: Listener) -> None:
        """Subscribe ``listener`` to future registrations."""
        with self._lock:
            self._listeners.append(listener)

    def get_operations(self) -> dict[str, OperationFn]:
        """Return a copy of the name to function mapping."""
        return dict(self._ops)

    def get(self, name: str) -> OperationFn:
        """Return the operation called ``name``.

        Raises:
            UnresolvableOperationError: If ``name`` is not registered.
        """
        try:
            return self._ops[name]
        except KeyError:
            msg = f"Operation [{name}] is not registered"
            raise UnresolvableOperationError(msg) from None

    def scale_power(self, name: str) -> int:
        """Return the scale power ``name`` was registered with.

        Raises:
            UnresolvableOperationError: If ``name`` is not registered.
        """
        try:
            return self._scale_powers[name]
        except KeyError:
            msg = f"Operation [{name}] is not registered"
            raise UnresolvableOperationError(msg) from None

    def __contains__(self, name: object) -> bool:
        return name in self._ops

    def __iter__(self):
        return iter(list(self._ops))

    def __len__(self) -> int:
        return len(self._ops)
