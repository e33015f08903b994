"""Entry point for Axigally Setlist Shuffle — build a gig setlist from the song catalog."""

import logging


def main():
    from src.config import CATALOG_PATH, LOG_FILE, LOG_LEVEL
    from src.logging_setup import configure_logging

    configure_logging(LOG_LEVEL, LOG_FILE)
    logger = logging.getLogger("setlist_shuffle")

    from src.adapters.catalog.csv_catalog_adapter import CsvCatalogAdapter
    from src.domain.setlist_engine import SetlistEngine
    from src.ui.app import run_app
    from src.usecases.load_catalog import LoadCatalogUseCase

    engine = SetlistEngine()
    catalog = CsvCatalogAdapter(CATALOG_PATH)

    print(f"Loading songs from {CATALOG_PATH}...")
    outcome = LoadCatalogUseCase(catalog).execute(engine)
    if outcome.ok:
        print(f"Found {outcome.loaded} songs ({len(outcome.skipped)} lines skipped).")
    else:
        print(f"Error reading file: {outcome.error}")
        logger.warning("Starting with an empty song pool")

    run_app(engine, catalog, outcome)


if __name__ == "__main__":
    main()
