# =========================================================
# RECORD STORE
# - One JSON array-of-objects file per collection
# - Atomic replace on every write (temp file + os.replace)
# - One lock per collection, so read-modify-write cycles are serialized
# - Multi-collection transactions commit through a journal that is
#   replayed on startup if the process died mid-commit
# - A commit that fails halfway is rolled back; if the rollback fails
#   too, its collections refuse writes until the journal is replayed
# =========================================================

import copy
import json
import logging
import os
import re
import tempfile
import threading
import time
import uuid
from contextlib import ExitStack, contextmanager, suppress
from pathlib import Path

from laptopdesk.core.errors import StorageFailure

logger = logging.getLogger("laptopdesk")

JOURNAL_PREFIX = "_journal-"

_COLLECTION_NAME = re.compile(r"^[a-z][a-z0-9_]*$")


class RecordStore:
    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

        # Collections with a journal that must be replayed before any new write
        self._blocked: set[str] = set()
        self._journal_seq = 0

        self._recover()

    def path_for(self, collection: str) -> Path:
        if not _COLLECTION_NAME.match(collection):
            raise ValueError(f"Invalid collection name: {collection!r}")
        return self.data_dir / f"{collection}.json"

    # ---------------- READ ----------------
    def load(self, collection: str) -> list[dict]:
        """
        Return every record of a collection in stored order.

        A missing file is an empty collection. Anything else that prevents
        reading the file (permissions, bad JSON, a non-array document)
        raises StorageFailure.
        """
        path = self.path_for(collection)

        try:
            with path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            logger.error(f"Failed to read collection '{collection}': {exc}")
            raise StorageFailure(f"Unable to read {collection}") from exc

        if not isinstance(data, list):
            logger.error(f"Collection '{collection}' is not a JSON array")
            raise StorageFailure(f"Unable to read {collection}")

        return data

    # ---------------- WRITE ----------------
    def save(self, collection: str, records: list[dict]) -> None:
        path = self.path_for(collection)
        with self._lock(collection):
            self._check_writable([collection])
            self._write_atomic(path, list(records))

    @contextmanager
    def transaction(self, *collections: str):
        """
        Hold the locks of the named collections for the duration of the block.

        Writes made through the yielded Transaction are staged and only
        committed when the block exits cleanly. An exception inside the
        block discards them.
        """
        names = sorted(set(collections))
        for name in names:
            self.path_for(name)

        with ExitStack() as stack:
            # Sorted acquisition keeps overlapping transactions deadlock free
            for name in names:
                stack.enter_context(self._lock(name))

            self._check_writable(names)
            txn = Transaction(self, names)
            yield txn
            self._commit(txn.staged)

    # ---------------- INTERNALS ----------------
    def _lock(self, collection: str) -> threading.RLock:
        with self._locks_guard:
            return self._locks.setdefault(collection, threading.RLock())

    def _commit(self, staged: dict[str, list[dict]]) -> None:
        if not staged:
            return

        if len(staged) == 1:
            (collection, records), = staged.items()
            self._write_atomic(self.path_for(collection), records)
            return

        journal = self.data_dir / (
            f"{JOURNAL_PREFIX}{self._next_journal_seq():020d}-{uuid.uuid4().hex}.json"
        )
        previous = {
            collection: self.load(collection) if self.path_for(collection).exists() else None
            for collection in staged
        }

        self._write_atomic(journal, staged)

        applied = []
        try:
            for collection, records in staged.items():
                self._write_atomic(self.path_for(collection), records)
                applied.append(collection)
        except StorageFailure:
            self._rollback(journal, staged, previous, applied)
            raise

        try:
            journal.unlink()
        except OSError as exc:
            # Committed, but a leftover journal must not be replayed over newer writes
            self._blocked.update(staged)
            logger.error(
                f"Could not remove {journal.name} ({exc}); "
                f"{', '.join(sorted(staged))} are read-only until restart"
            )

    def _next_journal_seq(self) -> int:
        # Strictly increasing, so sorted journal names replay in commit order
        with self._locks_guard:
            self._journal_seq = max(time.time_ns(), self._journal_seq + 1)
            return self._journal_seq

    def _rollback(self, journal: Path, staged, previous, applied) -> None:
        try:
            for collection in reversed(applied):
                if previous[collection] is None:
                    self.path_for(collection).unlink(missing_ok=True)
                else:
                    self._write_atomic(self.path_for(collection), previous[collection])
            journal.unlink()

        except (OSError, StorageFailure) as exc:
            # Files are mixed; only replaying the journal on restart repairs them
            self._blocked.update(staged)
            logger.error(
                f"Rollback of {journal.name} failed ({exc}); "
                f"{', '.join(sorted(staged))} are read-only until restart"
            )
            return

        logger.warning(f"Commit of {', '.join(sorted(staged))} failed and was rolled back")

    def _check_writable(self, collections) -> None:
        blocked = self._blocked.intersection(collections)
        if blocked:
            raise StorageFailure(
                f"Unable to save {', '.join(sorted(blocked))}: pending recovery"
            )

    def _apply(self, staged: dict[str, list[dict]]) -> None:
        for collection, records in staged.items():
            self._write_atomic(self.path_for(collection), records)

    def _recover(self) -> None:
        for journal in sorted(self.data_dir.glob(f"{JOURNAL_PREFIX}*.json")):
            try:
                staged = json.loads(journal.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.error(f"Unreadable transaction journal {journal.name}: {exc}")
                raise StorageFailure("Unable to recover pending transaction") from exc

            logger.warning(
                f"Replaying unfinished transaction {journal.name} "
                f"({', '.join(sorted(staged))})"
            )
            self._apply(staged)
            journal.unlink()

    def _write_atomic(self, path: Path, payload) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self.data_dir,
            prefix=f".{path.stem}.",
            suffix=".tmp",
        )

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)

        except (OSError, TypeError, ValueError) as exc:
            with suppress(FileNotFoundError):
                os.unlink(tmp_name)
            logger.error(f"Failed to write {path.name}: {exc}")
            raise StorageFailure(f"Unable to save {path.stem}") from exc


class Transaction:
    """Load/save view over a RecordStore that stages writes until commit."""

    def __init__(self, store: RecordStore, collections):
        self._store = store
        self._collections = frozenset(collections)
        self.staged: dict[str, list[dict]] = {}

    def load(self, collection: str) -> list[dict]:
        self._check(collection)

        if collection in self.staged:
            return copy.deepcopy(self.staged[collection])

        return self._store.load(collection)

    def save(self, collection: str, records: list[dict]) -> None:
        self._check(collection)
        self.staged[collection] = list(records)

    def _check(self, collection: str) -> None:
        if collection not in self._collections:
            raise ValueError(f"Collection '{collection}' is not part of this transaction")
