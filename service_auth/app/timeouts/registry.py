"""
Per-operation artificial response delay.
"""

import threading
from typing import Dict, Mapping, Optional

from shared.logging import get_logger

from ..errors import InvalidOperationError, InvalidTimeoutError
from ..operations import OperationKind


class TimeoutRegistry:
    """Holds the injected delay, in milliseconds, for each delay-bearing operation.

    Writes and snapshots run under one lock so a snapshot never mixes values
    from two writes. Readers get the value stored by the last completed
    ``set``; a caller that already read a value keeps it.
    """

    def __init__(self, initial: Optional[Mapping[str, int]] = None):
        self.logger = get_logger("auth.timeouts")
        self._lock = threading.Lock()
        self._delays_ms: Dict[OperationKind, int] = {op: 0 for op in OperationKind.delayed()}
        for name, seconds in (initial or {}).items():
            self.set(OperationKind.parse_delayed(name), seconds)

    def set(self, op: OperationKind, seconds: int) -> Dict[str, int]:
        """Store ``seconds`` as the delay for ``op`` and return the new snapshot."""
        if seconds < 0:
            raise InvalidTimeoutError(seconds)
        if op not in self._delays_ms:
            raise InvalidOperationError(op.value)

        with self._lock:
            self._delays_ms[op] = seconds * 1000
            snapshot = self._snapshot_locked()

        self.logger.info("Timeout updated", operation=op.value, seconds=seconds)
        return snapshot

    def get(self, op: OperationKind) -> int:
        """Current delay for ``op`` in milliseconds."""
        with self._lock:
            return self._delays_ms.get(op, 0)

    def snapshot(self) -> Dict[str, int]:
        """All delays in seconds, keyed by wire name."""
        with self._lock:
            return self._snapshot_locked()

    def reset(self):
        with self._lock:
            for op in self._delays_ms:
                self._delays_ms[op] = 0

    def _snapshot_locked(self) -> Dict[str, int]:
        return {op.value: self._delays_ms[op] // 1000 for op in OperationKind.delayed()}
