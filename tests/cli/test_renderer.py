"""Tests for the classification renderer."""

from rich.console import Console

from mediaparser.cli.renderer import classification_to_dict, render_classifications
from mediaparser.models.core import MediaType, MovieDetails, TVDetails


def test_render_classifications_table_and_summary() -> None:
    console = Console(record=True, width=200, color_system=None)
    render_classifications(
        [
            (
                "The.Venture.Bros.S06.Special",
                MediaType.TV,
                TVDetails(title="The.Venture.Bros", season=6),
            ),
            (
                "I.Heart.Huckabees.2004.720p",
                MediaType.MOVIE,
                MovieDetails(title="I.Heart.Huckabees", year=2004),
            ),
            ("Band - Album S01 (2014) - V0", MediaType.AMBIGUOUS, None),
            ("nothing", MediaType.UNKNOWN, None),
        ],
        console=console,
    )
    output = console.export_text()

    assert "Media Classification" in output
    assert "title='The.Venture.Bros', season=6" in output
    assert "episode" not in output
    assert "title='I.Heart.Huckabees', year=2004" in output
    assert "ambiguous" in output
    assert "Total: 4 | Unknown: 1 | Ambiguous: 1" in output


def test_render_empty_results() -> None:
    console = Console(record=True, width=120, color_system=None)
    render_classifications([], console=console)
    assert "Total: 0 | Unknown: 0 | Ambiguous: 0" in console.export_text()


def test_classification_to_dict_uses_label_and_json_details() -> None:
    data = classification_to_dict(
        "Archer.2009.S06E03.720p",
        MediaType.TV,
        TVDetails(title="Archer.2009", season=6, episode=3),
    )
    assert data == {
        "name": "Archer.2009.S06E03.720p",
        "type": "tv",
        "label": "tv show",
        "details": {"type": "tv", "title": "Archer.2009", "season": 6, "episode": 3},
    }
