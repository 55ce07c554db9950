import pytest

from sitegen.config import validate_config
from sitegen.render import render_home
from sitegen.render.pages import (
    HOME_SERVICES_LIMIT,
    build_about_teaser,
    build_features_section,
    build_services_preview,
    build_stats_section,
    join_sections,
)

STAT_MARKER = 'className="text-4xl font-bold"'


def test_minimal_home_page(minimal_document: dict) -> None:
    page = render_home(validate_config(minimal_document))

    assert 'title={"Acme AS"}' in page
    assert 'subtitle={""}' in page
    assert 'primaryCta={"Kontakt oss"}' in page
    assert 'secondaryCta={"Les mer"}' in page
    assert "<section" not in page
    assert "<Services" not in page
    assert "<About" not in page
    assert "<Features" not in page
    assert "<CTASection" in page
    assert "<Contact\n" in page


def test_omitted_sections_leave_no_gaps(minimal_document: dict) -> None:
    page = render_home(validate_config(minimal_document))

    assert "\n\n\n" not in page
    assert "/>\n\n      <CTASection" in page


def test_stats_rendered_in_order(full_document: dict) -> None:
    page = render_home(validate_config(full_document))

    assert page.count(STAT_MARKER) == 3
    positions = [page.index(f"{{{value}}}") for value in ('"25+"', '"300"', '"Norge"')]
    assert positions == sorted(positions)


def test_empty_stats_render_nothing(full_document: dict) -> None:
    full_document["pages"]["home"]["stats"] = []

    page = render_home(validate_config(full_document))

    assert STAT_MARKER not in page
    assert "<section" not in page


def test_services_preview_is_truncated(full_document: dict) -> None:
    page = render_home(validate_config(full_document))

    for letter in "ABCDEF":
        assert f'"title": "Service {letter}"' in page
    assert "Service G" not in page
    assert "Service H" not in page
    positions = [page.index(f"Service {letter}") for letter in "ABCDEF"]
    assert positions == sorted(positions)
    # the preview only carries titles and descriptions
    assert '"A1"' not in page


def test_services_preview_uses_default_title(full_document: dict) -> None:
    full_document["pages"]["services"].pop("title")

    page = render_home(validate_config(full_document))

    assert 'title={"Våre tjenester"}' in page


def test_about_teaser_present_for_empty_about(minimal_document: dict) -> None:
    minimal_document["pages"] = {"about": {}}

    page = render_home(validate_config(minimal_document))

    assert "<About" in page
    assert 'title={"Om oss"}' in page
    assert "points={[]}" in page


def test_about_teaser_lists_value_titles(full_document: dict) -> None:
    page = render_home(validate_config(full_document))

    assert '"Ærlighet"' in page
    assert "Vi sier det som det er" not in page


def test_features_section(full_document: dict) -> None:
    page = render_home(validate_config(full_document))

    assert 'title={"Hvorfor velge oss?"}' in page
    assert '"description": "Erfarne fagfolk"' in page


def test_section_order(full_document: dict) -> None:
    page = render_home(validate_config(full_document))

    markers = ["<Hero", STAT_MARKER, "<Services", "<About", "<Features", "<CTASection", "<Contact\n"]
    positions = [page.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_hero_prefers_explicit_values(full_document: dict) -> None:
    page = render_home(validate_config(full_document))

    assert 'title={"Vi bygger"}' in page
    assert 'subtitle={"Siden 1999"}' in page


def test_hero_subtitle_falls_back_to_tagline(minimal_document: dict) -> None:
    minimal_document["company"]["tagline"] = "Best i byen"

    page = render_home(validate_config(minimal_document))

    assert 'subtitle={"Best i byen"}' in page


def test_layout_props(full_document: dict) -> None:
    page = render_home(validate_config(full_document))

    assert 'companyName: "Acme AS"' in page
    assert 'companyName: "Acme Holding AS"' in page
    assert 'description: "Kvalitet til avtalt tid"' in page
    assert '"phone": "+47 12 34 56 78"' in page
    assert "transparent: true," in page
    assert 'const PRIMARY_COLOR = "#112233";' in page
    assert 'const ACCENT_COLOR = "#AABBCC";' in page


def test_nav_links(minimal_document: dict) -> None:
    page = render_home(validate_config(minimal_document))

    assert '{ label: "Tjenester", href: "/tjenester" },' in page
    assert '{ label: "Om oss", href: "/om-oss" },' in page
    assert '{ label: "Kontakt", href: "/kontakt" },' in page


def test_quotes_cannot_break_markup(minimal_document: dict) -> None:
    minimal_document["company"]["name"] = 'Acme "Best" AS'

    page = render_home(validate_config(minimal_document))

    assert 'title={"Acme \\"Best\\" AS"}' in page


@pytest.mark.parametrize(
    "builder, empty",
    [
        (build_stats_section, ()),
        (build_features_section, ()),
        (build_about_teaser, None),
    ],
)
def test_section_builders_return_empty_string(builder, empty) -> None:
    assert builder(empty) == ""


def test_services_preview_empty(minimal_document: dict) -> None:
    config = validate_config(minimal_document)

    assert build_services_preview(config.pages.services) == ""


def test_join_sections_skips_empty_blocks() -> None:
    assert join_sections(["a", "", "b", ""]) == "a\n\nb"


def test_home_services_limit() -> None:
    assert HOME_SERVICES_LIMIT == 6
