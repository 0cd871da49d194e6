from datetime import date, timedelta
import logging
import random

from app.core.config import settings
from app.core.logging_setup import configure_logging
from app.db import create_db_engine, create_session_factory, init_db
from app.repositories.hikes import HikeRepository
from app.stores.sql import SqlHikeStore

logger = logging.getLogger("seed_demo_hikes")

DEMO_TRAILS = [
    # name, location, (lat, lon), route type
    ("Ridge Trail", "Blue Mountains", (-33.7125, 150.3119), "Loop"),
    ("Grand Canyon Walk", "Blackheath", (-33.6333, 150.2833), "Out & Back"),
    ("National Pass", "Wentworth Falls", (-33.7264, 150.3753), "Loop"),
    ("Six Foot Track", "Katoomba", (-33.7167, 150.3000), "Point to Point"),
    ("Bondi to Coogee", "Sydney", (-33.8915, 151.2767), "Point to Point"),
    ("Spit Bridge to Manly", "Sydney", None, "Point to Point"),
]


def seed_demo_hikes(repo: HikeRepository, weeks: int = 12) -> int:
    """Log one demo hike per week for the last `weeks` weeks."""
    today = date.today()
    created = 0

    for week in range(weeks):
        hike_date = today - timedelta(weeks=week, days=random.randint(0, 6))
        name, location, coords, route_type = random.choice(DEMO_TRAILS)
        done = week > 0

        result = repo.create_hike(
            {
                "name": name,
                "location": location,
                "date": hike_date,
                "parking": random.choice(["Yes", "No"]),
                "length": round(random.uniform(3.0, 22.0), 1),
                "route_type": route_type,
                "difficulty": random.choice(["Easy", "Moderate", "Hard"]),
                "notes": "Demo hike.",
                "locationCoords": (
                    {"latitude": coords[0], "longitude": coords[1]} if coords else None
                ),
                "is_completed": done,
                "completed_date": hike_date if done else None,
            }
        )
        if result.success:
            created += 1
        else:
            logger.error("Failed to seed hike", extra={"error": result.error})

    return created


def main():
    configure_logging(settings.log_level, sql_echo=settings.sql_echo)
    engine = create_db_engine(settings.database_url, timeout=settings.database_timeout)
    try:
        init_db(engine)
        repo = HikeRepository(SqlHikeStore(create_session_factory(engine)))
        repo.clear_all_hikes()
        logger.info("Seeded %s demo hikes", seed_demo_hikes(repo))
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
