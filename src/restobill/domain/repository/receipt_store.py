"""Abstract sink for rendered receipts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ReceiptStore(ABC):

    @abstractmethod
    def save(self, order_id: int, text: str) -> Path:
        """Write the receipt for ``order_id`` and return where it went.

        Implementations raise ``OSError`` when the receipt cannot be written.
        """
