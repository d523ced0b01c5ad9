# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Database unit of work implementation."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blogapi.shared.errors import StorageUnavailableError
from blogapi.shared.logging import logger

SessionFactory = Callable[[], Session]


@dataclass(slots=True)
class SqlAlchemyUnitOfWork(AbstractContextManager):
    """One transaction: commit on clean exit, rollback on any exception."""

    session_factory: SessionFactory
    _session: Session | None = None

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self.session_factory()
        logger.debug("uow: session opened")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        assert self._session is not None
        try:
            if exc:
                logger.debug(f"uow: rollback due to {exc_type.__name__}")
                self._session.rollback()
            else:
                self._session.commit()
                logger.debug("uow: committed")
        except Exception:
            logger.exception("uow: exception while finalising")
            self._session.rollback()
            raise
        finally:
            self._session.close()
            logger.debug("uow: session closed")
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork session accessed before entering context")
        return self._session


@contextmanager
def unit_of_work_scope(factory: SessionFactory, operation: str) -> Iterator[Session]:
    """Yield a session; driver failures surface as ``StorageUnavailableError``."""

    try:
        with SqlAlchemyUnitOfWork(factory) as uow:
            yield uow.session
    except SQLAlchemyError as exc:
        logger.error(f"uow: storage failure during {operation}: {type(exc).__name__}")
        raise StorageUnavailableError(operation) from exc
