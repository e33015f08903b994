"""Shared colour palette for the Flet views."""

BG = "#0D1117"
BG_CARD = "#161B22"
BG_INPUT = "#21262D"
BG_SELECTED = "#1DB95440"
FG = "#E6EDF3"
FG_DIM = "#8B949E"
ACCENT = "#1DB954"
BORDER = "#30363D"
DANGER = "#F85149"
