"""Main Flet application — hosts the setlist view in a desktop window."""

import logging

import flet as ft

from src.config import APP_NAME, WINDOW_HEIGHT, WINDOW_WIDTH
from src.domain.ports import CatalogPort
from src.domain.setlist_engine import SetlistEngine
from src.ui.setlist_view import SetlistView
from src.ui.theme import BG
from src.usecases.load_catalog import LoadCatalogOutcome
from src.version import __version__

logger = logging.getLogger("setlist_shuffle.ui")


def build_page(page: ft.Page, engine: SetlistEngine, catalog: CatalogPort, outcome: LoadCatalogOutcome) -> SetlistView:
    page.title = f"{APP_NAME} {__version__}"
    page.bgcolor = BG
    page.window.width = WINDOW_WIDTH
    page.window.height = WINDOW_HEIGHT

    view = SetlistView(page=page, engine=engine, catalog=catalog)
    page.add(view)
    view.report_load(outcome)
    return view


def run_app(engine: SetlistEngine, catalog: CatalogPort, outcome: LoadCatalogOutcome):
    logger.info("Opening window (pool=%s)", len(engine.get_song_pool()))

    def main(page: ft.Page):
        build_page(page, engine, catalog, outcome)

    ft.app(target=main)
