"""Schedule shows for a movie from the command line.

Example:
    python -m quickshow.scripts.add_shows 603692 --price 12.5 \\
        --show 2026-11-01=14:00,18:30 --show 2026-11-02=20:00
"""

import argparse
import asyncio
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from quickshow.database import AsyncSessionLocal
from quickshow.exceptions import QuickShowError
from quickshow.repositories import MovieRepository, ShowRepository
from quickshow.schemas.show import ShowInput
from quickshow.services.show_ingestion import ShowIngestionService
from quickshow.services.tmdb_client import TMDbClient

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def parse_show_arg(value: str) -> ShowInput:
    """Parse ``YYYY-MM-DD=HH:MM,HH:MM`` into a ShowInput."""
    show_date, sep, times = value.partition("=")
    if not sep or not show_date:
        raise argparse.ArgumentTypeError(f"expected DATE=TIME[,TIME...], got {value!r}")
    return ShowInput(date=show_date, time=[t.strip() for t in times.split(",") if t.strip()])


async def add_shows(movie_id: str, shows_input: list[ShowInput], price: float) -> bool:
    """Run the ingestion service in its own session. Returns True on success."""
    async with AsyncSessionLocal() as db:
        service = ShowIngestionService(MovieRepository(db), ShowRepository(db), TMDbClient())
        try:
            message = await service.add_show(movie_id, shows_input, price)
            await db.commit()
        except QuickShowError as e:
            await db.rollback()
            logger.error(e.message)
            return False
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Database error while saving shows: {e}")
            return False

    logger.info(message)
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Schedule shows for a TMDb movie.")
    parser.add_argument("movie_id", help="TMDb movie ID")
    parser.add_argument("--price", type=float, required=True, help="Ticket price for every show")
    parser.add_argument(
        "--show",
        dest="shows",
        type=parse_show_arg,
        action="append",
        required=True,
        metavar="DATE=TIME[,TIME...]",
        help="Date and comma-separated times, may be repeated",
    )
    args = parser.parse_args()

    ok = asyncio.run(add_shows(args.movie_id, args.shows, args.price))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
