# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Cover image storage adapter."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import BinaryIO
from urllib.parse import quote, unquote, urlparse

from blog_backend.domain.posts.repositories import ObjectStore
from blog_backend.shared.errors.base import StorageError
from blog_backend.shared.logging import logger

PUBLIC_PREFIX = "/uploads"


class LocalObjectStore(ObjectStore):
    """Bucket-like store on the local filesystem, served under ``/uploads``."""

    def __init__(self, root: Path, public_base_url: str) -> None:
        self._root = root
        self._root.mkdir(parents=True, exist_ok=True)
        self._base_url = public_base_url.rstrip("/")

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, name: str) -> Path:
        path = (self._root / name).resolve()
        if path.parent != self._root.resolve():
            msg = "Attempted directory traversal outside storage root"
            raise ValueError(msg)
        return path

    def public_url(self, name: str) -> str:
        return f"{self._base_url}{PUBLIC_PREFIX}/{quote(name)}"

    @staticmethod
    def object_name(name_or_url: str) -> str:
        """Last path segment of a public URL, or the name unchanged."""
        if "://" in name_or_url:
            path = urlparse(name_or_url).path
            return unquote(path.rsplit("/", 1)[-1])
        return name_or_url

    def put(self, name: str, stream: BinaryIO) -> str:
        file_path = self._resolve(name)
        try:
            with file_path.open("wb") as fh:
                shutil.copyfileobj(stream, fh)
        except OSError as exc:
            logger.error(f"storage: write failed name={name} ({type(exc).__name__})")
            raise StorageError("file_upload_error") from exc
        logger.debug(f"storage: write path={file_path} size={file_path.stat().st_size}")
        return self.public_url(name)

    def delete(self, name_or_url: str) -> None:
        name = self.object_name(name_or_url)
        try:
            file_path = self._resolve(name)
        except ValueError as exc:
            raise StorageError("file_delete_error", context={"name": name}) from exc

        try:
            file_path.unlink()
        except FileNotFoundError:
            logger.warning(f"storage: delete skipped, object not found name={name}")
            return
        except OSError as exc:
            logger.error(f"storage: delete failed name={name} ({type(exc).__name__})")
            raise StorageError("file_delete_error", context={"name": name}) from exc
        logger.info(f"storage: deleted name={name}")


__all__ = ["LocalObjectStore", "PUBLIC_PREFIX"]
