"""ReceiptStore that writes ``receipt_<KOT>.txt`` files to a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from restobill.domain.repository.receipt_store import ReceiptStore

logger = logging.getLogger(__name__)


class FileReceiptStore(ReceiptStore):

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @staticmethod
    def filename_for(order_id: int) -> str:
        return f"receipt_{order_id}.txt"

    def save(self, order_id: int, text: str) -> Path:
        path = self._directory / self.filename_for(order_id)
        # newline="" keeps the "\n" separators on every platform
        with open(path, "w", encoding="ascii", errors="replace", newline="") as fh:
            fh.write(text)
            fh.flush()
        logger.debug("Wrote receipt for order #%s to %s", order_id, path)
        return path
