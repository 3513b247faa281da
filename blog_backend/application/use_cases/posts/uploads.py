# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import BinaryIO

from werkzeug.utils import secure_filename

from blog_backend.domain.posts.repositories import ObjectStore
from blog_backend.shared.logging import logger


@dataclass(slots=True)
class CoverUpload:
    filename: str
    stream: BinaryIO


def object_name_for(filename: str) -> str:
    """Unique, path-safe object name that keeps the original extension."""
    safe = secure_filename(filename or "") or "cover"
    return f"{uuid.uuid4().hex[:12]}_{safe}"


def store_cover(storage: ObjectStore, upload: CoverUpload) -> str:
    name = object_name_for(upload.filename)
    url = storage.put(name, upload.stream)
    logger.info(f"posts.cover: stored name={name}")
    return url
