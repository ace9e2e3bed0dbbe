"""Turn use-case failures into CLI errors.

Domain errors are the caller's to fix and are shown with their code.
Store failures are logged with the traceback and shown only as
``InternalError``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click
import structlog

from shopdesk.domain.exceptions import DomainException
from shopdesk.infrastructure.persistence.json_file_store import StoreError

logger = structlog.get_logger(__name__)


@contextmanager
def reported_errors() -> Iterator[None]:
    try:
        yield
    except DomainException as exc:
        raise click.ClickException(f"{exc.code}: {exc}") from exc
    except StoreError as exc:
        logger.exception("Store failure")
        raise click.ClickException("InternalError") from exc
