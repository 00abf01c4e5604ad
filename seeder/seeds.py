"""Default records for a fresh database.

The only record seeded is the super administrator.  ``seed`` is safe to run
on every deploy: it inserts the default account when the ``super_admin``
table is empty and leaves the table alone otherwise.
"""
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .models import db, SuperAdmin

logger = logging.getLogger(__name__)

DEFAULT_ADMIN = {
    'first_name': 'Kalpesh',
    'last_name': 'Fulpagare',
    'email': 'admin@example.com',
    'password': 'kalpesh1234',
}


class StoreUnavailable(Exception):
    """The database could not be reached or refused the write."""

    @classmethod
    def from_error(cls, exc: SQLAlchemyError) -> StoreUnavailable:
        # the driver error only; the wrapper text carries the bound parameters
        return cls(str(getattr(exc, 'orig', None) or exc))


def admin_count(session) -> int:
    return session.scalar(select(func.count()).select_from(SuperAdmin))


def create_schema() -> None:
    """Create every table known to ``db``."""
    try:
        db.create_all()
    except SQLAlchemyError as exc:
        raise StoreUnavailable.from_error(exc) from exc


def seed(session=None) -> SuperAdmin | None:
    """Create the default super admin if no super admin exists.

    ``session`` defaults to ``db.session`` of the current app context.
    Returns the new record, or ``None`` when nothing was inserted.  The
    session is left without an open transaction either way.
    """
    session = session if session is not None else db.session
    try:
        if admin_count(session):
            session.rollback()
            logger.info("Super admin already present; nothing to seed")
            return None
        values = dict(DEFAULT_ADMIN)
        password = values.pop('password')
        admin = SuperAdmin(**values)
        admin.set_password(password)
        session.add(admin)
        session.commit()
    except IntegrityError:
        # another process inserted the same email between count and commit
        session.rollback()
        logger.info("Super admin %s was created concurrently", DEFAULT_ADMIN['email'])
        return None
    except SQLAlchemyError as exc:
        session.rollback()
        raise StoreUnavailable.from_error(exc) from exc
    logger.info("Created super admin %s", admin.email)
    return admin
