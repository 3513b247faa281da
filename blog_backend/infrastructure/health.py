# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from tenacity import Retrying, retry_if_exception_type, stop_never, wait_fixed

from blog_backend.infrastructure.db import ENGINE
from blog_backend.shared.config import load_config
from blog_backend.shared.logging import logger


def check_database() -> bool:
    with ENGINE.connect() as connection:
        connection.execute(text("SELECT 1"))
    return True


def wait_for_database(delay: float | None = None) -> None:
    """Block until the database answers, retrying forever with a fixed delay."""

    delay = load_config().database.retry_delay if delay is None else delay
    retry = Retrying(
        stop=stop_never,
        wait=wait_fixed(delay),
        retry=retry_if_exception_type(OperationalError),
        before_sleep=lambda state: logger.error(
            f"db.connect: failed (attempt={state.attempt_number}), retrying in {delay:.0f}s"
        ),
        reraise=True,
    )
    for attempt in retry:
        with attempt:
            check_database()
    logger.info("db.connect: connected to the database")


__all__ = ["check_database", "wait_for_database"]
