# src/roadmap_cli/storage/json_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for record store failures."""


class StoreIOError(StoreError):
    """The backing document could not be read or written."""


class CorruptStoreError(StoreError):
    """The backing document exists but does not hold a valid record array."""


class Record(Protocol):
    id: int

    def to_dict(self) -> dict[str, Any]: ...


R = TypeVar("R", bound=Record)


class RecordType(Protocol[R]):
    def from_dict(self, data: dict[str, Any]) -> R: ...


class Document(Protocol):
    """
    I/O boundary of a record store: one whole text document.

    read_text() returns None when the document does not exist yet.
    """

    def read_text(self) -> str | None: ...
    def write_text(self, text: str) -> None: ...


class FileDocument:
    """
    A document on local disk.

    Writes go to a sibling temp file which then replaces the target with
    os.replace, so readers see either the old or the new content.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FileDocument({str(self.path)!r})"

    def read_text(self) -> str | None:
        try:
            return self.path.read_text("utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StoreIOError(f"cannot read {self.path}: {exc}") from exc

    def write_text(self, text: str) -> None:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StoreIOError(f"cannot write {self.path}: {exc}") from exc


class LoadStatus(StrEnum):
    ABSENT = "absent"
    LOADED = "loaded"
    CORRUPT = "corrupt"


@dataclass(frozen=True, slots=True)
class LoadResult(Generic[R]):
    status: LoadStatus
    records: list[R] = field(default_factory=list)
    error: str | None = None


def next_id(records: Iterable[Record]) -> int:
    """1 for an empty sequence, else max(existing id) + 1."""
    return max((r.id for r in records), default=0) + 1


class JsonRecordStore(Generic[R]):
    """
    Ordered records of one type kept as a single pretty-printed JSON array.

    Every save rewrites the whole document. There is no locking: two processes
    doing read-modify-write on the same file can lose an update.
    """

    def __init__(self, document: Document, record_type: RecordType[R]) -> None:
        self.document = document
        self.record_type = record_type

    def inspect(self) -> LoadResult[R]:
        """Read the document and report whether it is absent, valid or corrupt."""
        raw = self.document.read_text()
        if raw is None:
            return LoadResult(LoadStatus.ABSENT)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            return LoadResult(LoadStatus.CORRUPT, error=f"invalid JSON: {exc}")

        try:
            records = self._decode(data)
        except (KeyError, TypeError, ValueError) as exc:
            return LoadResult(LoadStatus.CORRUPT, error=str(exc) or exc.__class__.__name__)

        return LoadResult(LoadStatus.LOADED, records)

    def load(self) -> list[R]:
        result = self.inspect()
        if result.status is LoadStatus.CORRUPT:
            logger.debug("Corrupt record store %r: %s", self.document, result.error)
            raise CorruptStoreError(f"{self._describe()} is corrupt: {result.error}")
        logger.debug(
            "Loaded %d records from %r (status=%s)",
            len(result.records),
            self.document,
            result.status,
        )
        return result.records

    def save(self, records: Sequence[R]) -> None:
        text = json.dumps([r.to_dict() for r in records], ensure_ascii=False, indent=2)
        self.document.write_text(text + "\n")
        logger.debug("Saved %d records to %r", len(records), self.document)

    def _decode(self, data: Any) -> list[R]:
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")

        records: list[R] = []
        seen: set[int] = set()
        for idx, item in enumerate(data):
            if not isinstance(item, dict):
                raise TypeError(f"item {idx} is not an object")
            try:
                record = self.record_type.from_dict(item)
            except KeyError as exc:
                raise KeyError(f"item {idx} is missing field {exc}") from exc
            except (TypeError, ValueError) as exc:
                raise ValueError(f"item {idx}: {exc}") from exc
            if record.id in seen:
                raise ValueError(f"duplicate id {record.id}")
            seen.add(record.id)
            records.append(record)
        return records

    def _describe(self) -> str:
        path = getattr(self.document, "path", None)
        return str(path) if path is not None else repr(self.document)
