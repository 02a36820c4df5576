"""
Seed script for Yelp Camp.

Clears the campground collection (and the reviews hanging off it) and fills
it with randomly generated demo campgrounds. Runs independently of the web
server:

    python seed.py --count 50
"""
import argparse
import logging
import random
import sys
from typing import Optional

from config import get_settings, setup_logging
from database import Database
from schemas import CampgroundIn
from seed_helpers import CITIES, DESCRIPTORS, PLACES

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 50
DESCRIPTION = (
    "Lorem ipsum dolor sit amet consectetur adipisicing elit. Doloribus animi delectus "
    "unde omnis iure repellat reprehenderit blanditiis veritatis recusandae nesciunt est "
    "distinctio mollitia, eos voluptatum exercitationem natus nostrum. Minima, molestiae."
)
IMAGE_URL = "https://source.unsplash.com/collection/483251"


def build_campground(rng: random.Random) -> CampgroundIn:
    place = rng.choice(CITIES)
    return CampgroundIn(
        title=f"{rng.choice(DESCRIPTORS)} {rng.choice(PLACES)}",
        location=f"{place['city']}, {place['state']}",
        description=DESCRIPTION,
        price=rng.randint(10, 29),
        image=IMAGE_URL,
    )


def seed(db: Database, count: int = DEFAULT_COUNT, rng: Optional[random.Random] = None) -> int:
    rng = rng or random.Random()
    removed = db.clear_campgrounds()
    logger.info("Deleted %d existing campgrounds", removed)
    for _ in range(count):
        db.create_campground(build_campground(rng))
    logger.info("Inserted %d campgrounds", count)
    return count


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Populate the campground collection with demo data.")
    parser.add_argument("-n", "--count", type=int, default=DEFAULT_COUNT,
                        help="number of campgrounds to create (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible data")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    db = Database.connect(settings.database_url, settings.database_name)
    try:
        seed(db, args.count, random.Random(args.seed))
    except Exception as e:
        logger.error("Seeding failed: %s", e)
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
