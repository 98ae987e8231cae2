"""Load the static exercise catalog (settings.catalog_path or argv[1]) into the database."""

import asyncio
import logging
import os
import sys

# Add parent directory to path so we can import goodlift modules
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from goodlift.core.config import get_settings
from goodlift.core.errors import CatalogError
from goodlift.db.session import async_session_maker, engine
from goodlift.services.catalog import load_catalog_file
from goodlift.services.store import import_exercises

logger = logging.getLogger("goodlift.import_catalog")


async def main(path: str) -> int:
    try:
        catalog = load_catalog_file(path)
    except CatalogError as e:
        logger.error("%s", e)
        return 1

    async with async_session_maker() as session:
        created = await import_exercises(session, catalog)
        await session.commit()
    await engine.dispose()
    print(f"Imported {created} new exercises ({len(catalog) - created} already present).")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else settings.catalog_path)))
