"""
Database utilities and transaction management.
"""

import contextlib
import logging
from typing import Iterator, Optional

from django.db import DatabaseError, transaction

from core.domain.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def store_transaction(using: Optional[str] = None) -> Iterator[None]:
    """
    Run a check-then-act sequence atomically.

    Everything inside the block shares one database transaction, so row
    locks taken with ``select_for_update`` hold until the block exits.
    Store failures surface as StoreUnavailableError; domain exceptions
    roll the transaction back and propagate unchanged.

    Usage:
        with store_transaction():
            license = repository.find_by_key_for_update(key)
            ...
    """
    try:
        with transaction.atomic(using=using):
            yield
    except DatabaseError as exc:
        logger.error("Store failure inside transaction: %s", exc, exc_info=True)
        raise StoreUnavailableError(str(exc)) from exc
