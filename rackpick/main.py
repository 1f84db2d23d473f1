"""
Rack Pick List Command Line Entry Point

Prints the rack-grouped pick list for a comma-separated list of order IDs.
"""
import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from rackpick.core.config import Settings, get_settings
from rackpick.core.database import (
    check_db_connection,
    create_db_engine,
    create_session_factory,
    init_db,
    session_scope,
)
from rackpick.core.exceptions import InputParseError, RackPickException, RepositoryError
from rackpick.core.logging import get_logger, setup_logging
from rackpick.repositories import SQLPickingRepository
from rackpick.services.picking import PickListReportService


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog='rackpick',
        description='Print a rack-grouped pick list for warehouse orders',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rackpick 101,102,103

Database and logging are configured through environment variables or .env
(DATABASE_URL, LOG_LEVEL, LOG_TO_FILE, ...).
        """
    )

    parser.add_argument(
        'order_ids',
        help='Comma-separated list of integer order IDs (e.g. 101,102,103)'
    )

    return parser.parse_args(argv)


def parse_order_ids(raw: str) -> List[int]:
    """
    Parse a comma-separated list of order IDs

    Raises InputParseError on empty or non-integer tokens.
    """
    if not raw or not raw.strip():
        raise InputParseError("No order IDs given")

    order_ids = []
    for position, token in enumerate(raw.split(","), 1):
        token = token.strip()
        if not token:
            raise InputParseError(f"Empty order ID at position {position} in {raw!r}")
        try:
            order_ids.append(int(token))
        except ValueError:
            raise InputParseError(f"Invalid order ID {token!r} at position {position}") from None
    return order_ids


def write_report(order_ids: List[int], settings: Settings, stream: TextIO) -> None:
    """Open the warehouse database and write the report for one run"""
    logger = get_logger("main")
    try:
        engine = create_db_engine(settings.DATABASE_URL)
    except SQLAlchemyError as e:
        raise RepositoryError(f"Cannot create database engine: {e}") from e

    try:
        if not check_db_connection(engine):
            raise RepositoryError("Cannot connect to database")
        logger.info("Connected to database")

        if settings.AUTO_CREATE_SCHEMA:
            init_db(engine)

        with session_scope(create_session_factory(engine)) as db:
            service = PickListReportService(SQLPickingRepository(db))
            service.write(order_ids, stream)
    except SQLAlchemyError as e:
        raise RepositoryError(f"Database error: {e}") from e
    finally:
        engine.dispose()


def format_settings_error(error: ValidationError) -> str:
    """Collapse a settings validation error into one line"""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid configuration: {problems}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(format_settings_error(e), file=sys.stderr)
        return 1

    logger = setup_logging()

    if settings.is_development:
        logger.info("The app is running in development env")

    try:
        order_ids = parse_order_ids(args.order_ids)
        write_report(order_ids, settings, sys.stdout)
    except RackPickException as e:
        logger.error(f"Pick list failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
