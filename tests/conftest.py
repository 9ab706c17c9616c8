"""
Shared fixtures: small catalog CSVs written to a temp directory.
"""
import csv
from pathlib import Path

import pandas as pd
import pytest

from catalog_analytics.config import REQUIRED_COLUMNS


HEADER = [
    "show_id", "type", "title", "director", "cast", "country",
    "date_added", "release_year", "rating", "duration", "listed_in", "description",
]

SAMPLE_ROWS = [
    ["s1", "Movie", "Dick Johnson Is Dead", "Kirsten Johnson", "", "United States",
     "September 25, 2021", "2020", "PG-13", "90 min", "Documentaries", "A filmmaker and her father."],
    ["s2", "TV Show", "Blood & Water", "", "Ama Qamata, Khosi Ngema", "South Africa",
     "September 24, 2021", "2021", "TV-MA", "2 Seasons", "International TV Shows, TV Dramas, TV Mysteries",
     "Two girls in Cape Town."],
    ["s3", "TV Show", "Ganglands", "Julien Leclercq", "Sami Bouajila, Tracy Gotoas", "",
     "September 24, 2021", "2021", "TV-MA", "1 Season", "Crime TV Shows, International TV Shows, TV Action & Adventure",
     "A heist gone wrong."],
    ["s4", "Movie", "Sankofa", "Haile Gerima", "Kofi Ghanaba, Oyafunmike Ogunlano",
     "United States, Ghana, Burkina Faso, United Kingdom, Germany, Ethiopia",
     "September 24, 2021", "1993", "TV-MA", "125 min", "Dramas, Independent Movies, International Movies",
     "A model on a shoot in Ghana."],
    ["s5", "Movie", "My Little Pony: A New Generation", "Robert Cullen, José Luis Ucha",
     "Vanessa Hudgens, Kimiko Glenn", "", "", "2021", "PG", "91 min", "Children & Family Movies",
     "Equestria has divided."],
    ["s6", "Movie", "Jaws", "Steven Spielberg", "Roy Scheider, Robert Shaw", "United States",
     "December 31, 2019", "1975", "PG", "124 min", "Dramas, Thrillers", "A shark."],
]


def write_catalog(path: Path, rows, header=HEADER) -> Path:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)
    return path


def raw_frame(**columns) -> pd.DataFrame:
    """Raw text table with every required column; unspecified columns are empty."""
    n = max((len(v) for v in columns.values()), default=0)
    data = {c: columns.get(c, [None] * n) for c in REQUIRED_COLUMNS}
    return pd.DataFrame(data, dtype=object)


@pytest.fixture
def catalog_file(tmp_path) -> Path:
    return write_catalog(tmp_path / "netflix_titles.csv", SAMPLE_ROWS)


@pytest.fixture
def make_catalog(tmp_path):
    """Factory: make_catalog(rows, name=..., header=...) -> path."""
    def _make(rows, name="catalog.csv", header=HEADER):
        return write_catalog(tmp_path / name, rows, header)
    return _make


def movie(title, release_year, date_added="", duration="100 min", type_="Movie", **extra):
    """One data row in HEADER order."""
    row = {
        "show_id": extra.get("show_id", title), "type": type_, "title": title,
        "director": extra.get("director", ""), "cast": extra.get("cast", ""),
        "country": extra.get("country", ""), "date_added": date_added,
        "release_year": str(release_year), "rating": "", "duration": duration,
        "listed_in": extra.get("listed_in", ""), "description": "",
    }
    return [row[c] for c in HEADER]
