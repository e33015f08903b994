"""Flet two-pane view: song pool on the left, working setlist on the right."""

from typing import Optional

import flet as ft

from src.domain.model import Song, format_duration
from src.domain.ports import CatalogPort
from src.domain.setlist_engine import SetlistEngine
from src.ui.theme import ACCENT, BG, BG_CARD, BG_INPUT, BG_SELECTED, BORDER, DANGER, FG, FG_DIM
from src.usecases.load_catalog import LoadCatalogOutcome
from src.usecases.save_setlist import SaveSetlistUseCase
from src.usecases.veto_song import VetoSongUseCase

BUTTON_WIDTH = 180


def pool_details(song: Song) -> str:
    return " | ".join([
        f"BPM: {song.bpm}",
        f"Length: {format_duration(song.duration_seconds)}",
        f"Key: {song.key}",
        f"Danceability: {song.danceability}",
        f"Happy: {song.happy}",
        f"Sad: {song.sad}",
        f"Relaxed: {song.relaxed}",
        f"Aggressive: {song.aggressiveness}",
        f"Notes: {song.notes}",
    ])


class SetlistView(ft.Column):
    """Pool browser and setlist editor."""

    def __init__(self, page: ft.Page, engine: SetlistEngine, catalog: CatalogPort):
        super().__init__(expand=True, spacing=0)
        self._page = page
        self.bgcolor = BG
        self.engine = engine

        # Use cases
        self.save_uc = SaveSetlistUseCase(catalog)
        self.veto_uc = VetoSongUseCase()

        # Selection
        self.selected_title: Optional[str] = None
        self.selected_position: Optional[int] = None

        # UI state refs
        self.pool_list = ft.ListView(expand=True, spacing=2, padding=6)
        self.setlist_list = ft.ListView(expand=True, spacing=2, padding=6)
        self.runtime_label = ft.Text(
            "Total Runtime: 0:00", size=14, weight=ft.FontWeight.BOLD, color=FG, text_align=ft.TextAlign.CENTER,
        )
        self.count_label = ft.Text("", size=11, color=FG_DIM, text_align=ft.TextAlign.CENTER)
        self.snack = ft.SnackBar(content=ft.Text(""))

        self._build_ui()
        self._refresh_pool()
        self._refresh_setlist()

    def _build_ui(self):
        pool_panel = ft.Container(
            expand=1,
            bgcolor=BG_CARD,
            border=ft.border.all(1, BORDER),
            border_radius=8,
            padding=10,
            content=ft.Column(
                [
                    ft.Text("Song Pool", size=14, color=ACCENT, weight=ft.FontWeight.BOLD),
                    ft.Text("Click a song, then add it to the setlist.", size=10, color=FG_DIM),
                    self.pool_list,
                ],
                spacing=4,
                expand=True,
            ),
        )

        setlist_panel = ft.Container(
            expand=1,
            bgcolor=BG_CARD,
            border=ft.border.all(1, BORDER),
            border_radius=8,
            padding=10,
            content=ft.Column(
                [
                    ft.Text("Setlist", size=14, color=ACCENT, weight=ft.FontWeight.BOLD),
                    self.count_label,
                    self.setlist_list,
                    self.runtime_label,
                ],
                spacing=4,
                expand=True,
                horizontal_alignment=ft.CrossAxisAlignment.CENTER,
            ),
        )

        lanes_section = ft.Container(
            content=ft.Row(
                [pool_panel, setlist_panel],
                spacing=10,
                expand=True,
                vertical_alignment=ft.CrossAxisAlignment.START,
            ),
            padding=ft.padding.all(10),
            expand=True,
        )

        actions_section = ft.Container(
            content=ft.Row(
                [
                    self._button("Add Selected Song", self._add_selected, ACCENT),
                    self._button("Clear Setlist", self._clear, BG_INPUT),
                    self._button("Sort Setlist by BPM", self._sort, BG_INPUT),
                    self._button("Veto Selected Song", self._veto_selected, DANGER),
                    self._button("Save Setlist", self._save, BG_INPUT),
                ],
                alignment=ft.MainAxisAlignment.CENTER,
                spacing=15,
                wrap=True,
            ),
            padding=ft.padding.symmetric(horizontal=20, vertical=10),
        )

        self.controls = [lanes_section, actions_section, self.snack]

    @staticmethod
    def _button(label: str, handler, bgcolor: str) -> ft.ElevatedButton:
        return ft.ElevatedButton(
            label,
            on_click=lambda _: handler(),
            bgcolor=bgcolor,
            color=FG,
            width=BUTTON_WIDTH,
        )

    # Rendering

    def _refresh_pool(self):
        rows = []
        for title, song in self.engine.get_song_pool().items():
            rows.append(
                ft.Container(
                    bgcolor=BG_SELECTED if title == self.selected_title else None,
                    border_radius=4,
                    padding=ft.padding.symmetric(horizontal=6, vertical=4),
                    on_click=lambda _, t=title: self._select_pool(t),
                    content=ft.Column(
                        [
                            ft.Text(song.title, size=14, weight=ft.FontWeight.BOLD, color=FG),
                            ft.Text(pool_details(song), size=11, color=FG_DIM),
                        ],
                        spacing=1,
                    ),
                )
            )
        self.pool_list.controls = rows

    def _refresh_setlist(self):
        rows = []
        for position, song in enumerate(self.engine.get_setlist()):
            rows.append(
                ft.Container(
                    bgcolor=BG_SELECTED if position == self.selected_position else None,
                    border_radius=4,
                    padding=ft.padding.symmetric(horizontal=6, vertical=4),
                    on_click=lambda _, p=position: self._select_setlist(p),
                    content=ft.Text(str(song), size=14, color=FG),
                )
            )
        self.setlist_list.controls = rows
        self.runtime_label.value = f"Total Runtime: {self.engine.total_runtime_label()}"
        self.count_label.value = f"{self.engine.setlist_size} songs"

    # Selection

    def _select_pool(self, title: str):
        self.selected_title = title
        self._refresh_pool()
        self.update()

    def _select_setlist(self, position: int):
        self.selected_position = position
        self._refresh_setlist()
        self.update()

    # Actions

    def _add_selected(self):
        if self.selected_title is None:
            self._show_snack("Please select a song first!")
            return
        self.engine.add_to_setlist(self.selected_title)
        self._refresh_setlist()
        self.update()

    def _clear(self):
        self.engine.clear_setlist()
        self.selected_position = None
        self._refresh_setlist()
        self.update()

    def _sort(self):
        self.engine.sort_setlist_by_bpm()
        self.selected_position = None
        self._refresh_setlist()
        self.update()

    def _veto_selected(self):
        if self.selected_position is None:
            self._show_snack("Please select a song in the setlist to veto.")
            return
        self.veto_uc.execute(self.engine, self.selected_position)
        self.selected_position = None
        self._refresh_setlist()
        self.update()

    def _save(self):
        outcome = self.save_uc.execute(self.engine)
        if outcome.ok:
            self._show_snack(f"Setlist saved to {outcome.path}!")
        else:
            self._show_snack(f"Error saving setlist: {outcome.error}")

    def report_load(self, outcome: LoadCatalogOutcome):
        """Surface catalog load problems once the view is on the page."""
        if not outcome.ok:
            self._show_snack(f"Error reading catalog: {outcome.error}")
        elif outcome.skipped:
            self._show_snack(f"Loaded {outcome.loaded} songs, skipped {len(outcome.skipped)} lines.")

    def _show_snack(self, msg: str):
        self.snack.content = ft.Text(msg)
        self.snack.open = True
        self._page.update()
