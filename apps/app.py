"""Gradio playground for the location autocomplete.

Run with ``python apps/app.py`` after ``pip install -e .[demo]``.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence

import gradio as gr

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from location_search import (  # noqa: E402
    LocationKind,
    LocationSearchService,
    ScoredCandidate,
    SearchOptions,
    get_container,
)
from location_search.domain.errors import SearchValidationError  # noqa: E402
from location_search.logging_setup import setup_logging  # noqa: E402
from location_search.matching import normalize_text  # noqa: E402

# ============================
# HELPERS
# ============================

COLUMNS = ["Name", "English name", "Type", "Code", "Country", "Score", "Distance (km)", "Popular"]
KIND_CHOICES = ["all"] + [kind.value for kind in LocationKind]


def suggestion_rows(results: Sequence[ScoredCandidate]) -> List[list]:
    """Turn search results into table rows."""
    rows = []
    for candidate in results:
        record = candidate.record
        distance = "" if candidate.distance_km is None else f"{candidate.distance_km:.1f}"
        rows.append(
            [
                record.name,
                record.name_en,
                record.kind.value,
                record.airport_code or "",
                record.country_code,
                candidate.match_score,
                distance,
                "★" if record.is_popular else "",
            ]
        )
    return rows


def run_search(
    service: LocationSearchService,
    query: str,
    kind: str = "all",
    country: str = "",
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    limit: int = 10,
):
    """Search and return (rows, status message) for the UI."""
    try:
        user_coordinates = (lat, lon) if lat is not None and lon is not None else None
        options = SearchOptions(
            kind_filter=kind,
            country_filter=country or None,
            result_limit=int(limit),
            user_coordinates=user_coordinates,
        )
        results = service.search(query or "", options)
    except SearchValidationError as e:
        return [], f"⚠️ {e.message}"

    folded = normalize_text((query or "").strip()).strip()
    mode = "popular" if len(folded) < service.config.min_query_length else "search"
    return suggestion_rows(results), f"{len(results)} result(s) · {mode}"


# ============================
# UI
# ============================

def build_app(service: LocationSearchService) -> gr.Blocks:
    with gr.Blocks(title="Location autocomplete") as app:
        gr.Markdown("# 📍 Location autocomplete")

        with gr.Row():
            query = gr.Textbox(label="🔎 Where to?", placeholder="antalya, AYT, Стамбул…")
            kind = gr.Dropdown(KIND_CHOICES, value="all", label="Type")
            country = gr.Textbox(label="Country (ISO-2)", max_lines=1)

        with gr.Row():
            lat = gr.Number(label="Your latitude", value=None)
            lon = gr.Number(label="Your longitude", value=None)
            limit = gr.Slider(1, 25, value=10, step=1, label="Max results")

        status = gr.Markdown()
        table = gr.Dataframe(headers=COLUMNS, interactive=False)

        def _on_change(q, k, c, la, lo, li):
            return run_search(service, q, k, c, la, lo, li)

        inputs = [query, kind, country, lat, lon, limit]
        for component in inputs:
            component.change(_on_change, inputs, [table, status])

    return app


if __name__ == "__main__":
    setup_logging()
    build_app(get_container().resolve(LocationSearchService)).launch()
