"""Checkout lock - pinned sources recorded after a fetch.

A pod fetched from a branch, a floating head or any other non-specific source
gets its resolved checkout options (e.g. the commit) written here, keyed by the
pod's root name, so the next install can ask for exactly the same revision.
"""

import json
import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class CheckoutLockEntry(BaseModel):
    """Pinned checkout of one pod (immutable)."""

    model_config = ConfigDict(frozen=True)

    name: str
    source: dict[str, str] = Field(default_factory=dict)
    checkout_options: dict[str, str]
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class CheckoutLockFile(BaseModel):
    """On-disk layout of the lock."""

    version: str = "1.0"
    pods: dict[str, CheckoutLockEntry] = Field(default_factory=dict)


class CheckoutLock:
    """
    Checkout lock stored as JSON at an app-provided path.

    The file is written on every ``record``. An unreadable file is reported and
    treated as empty: the lock only saves work, losing it is never fatal.

    Example:
        >>> lock = CheckoutLock(lock_path=Path("Pods") / "checkout.lock")
        >>> lock.record("Foo", {"git": url, "branch": "main"}, {"git": url, "commit": "abc123"})
        >>> lock.get_entry("Foo").checkout_options["commit"]
        'abc123'
    """

    def __init__(self, lock_path: Path):
        self.lock_path = lock_path
        self._file = self._read()

    def _read(self) -> CheckoutLockFile:
        if not self.lock_path.exists():
            return CheckoutLockFile()
        try:
            lock_file = CheckoutLockFile.model_validate_json(self.lock_path.read_text())
        except (OSError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable checkout lock {self.lock_path}: {e}")
            return CheckoutLockFile()
        if lock_file.version != CheckoutLockFile().version:
            logger.warning(f"Checkout lock {self.lock_path} has version {lock_file.version}, entries may be stale")
        return lock_file

    def record(self, name: str, source: dict[str, str], checkout_options: dict[str, str]) -> CheckoutLockEntry:
        """
        Pin the checkout of a pod, replacing any previous entry.

        Args:
            name: Root name of the pod
            source: Source options declared by the specification
            checkout_options: Options pinning the fetched revision

        Returns:
            The recorded entry
        """
        entry = CheckoutLockEntry(name=name, source=dict(source), checkout_options=dict(checkout_options))
        self._file.pods[name] = entry

        self.lock_path.parent.mkdir(parents=True, exist_ok=True)
        payload = self._file.model_dump(mode="json")
        payload["pods"] = dict(sorted(payload["pods"].items()))
        self.lock_path.write_text(json.dumps(payload, indent=2) + "\n")

        logger.debug(f"Pinned {name} to {checkout_options}")
        return entry

    def get_entry(self, name: str) -> CheckoutLockEntry | None:
        """The pinned checkout of a pod, or None if it was never recorded."""
        return self._file.pods.get(name)
