from sitegen.config import validate_config
from sitegen.render import render_about, render_contact, render_services, render_site
from sitegen.render.literals import js_value, template_literal


def test_services_page_lists_every_service(full_document: dict) -> None:
    page = render_services(validate_config(full_document))

    positions = [page.index(f'"title": "Service {letter}"') for letter in "ABCDEFGH"]
    assert positions == sorted(positions)
    assert '"H1",' in page
    assert 'title={"Tjenester"}' in page
    assert 'subtitle={"Dette gjør vi"}' in page
    assert 'intro={"Vi tilbyr mye."}' in page
    assert page.startswith('import { ServicesPage, Layout } from "@/components";')


def test_services_page_defaults(minimal_document: dict) -> None:
    page = render_services(validate_config(minimal_document))

    assert 'title={"Våre tjenester"}' in page
    assert "services={[]}" in page


def test_services_keep_duplicates(full_document: dict) -> None:
    services = full_document["pages"]["services"]["services"]
    services.append(dict(services[0]))

    page = render_services(validate_config(full_document))

    assert page.count('"title": "Service A"') == 2


def test_about_page_renders_titles_only(full_document: dict) -> None:
    page = render_about(validate_config(full_document))

    assert 'title={"Historien vår"}' in page
    assert 'subtitle={"Velkommen"}' in page
    assert 'companyName={"Acme AS"}' in page
    assert "content={`Vi startet i en garasje.`}" in page
    assert '"Ærlighet",' in page
    assert '"Presisjon"' in page
    assert "Vi måler to ganger" not in page


def test_about_page_escapes_template_literal(full_document: dict) -> None:
    full_document["pages"]["about"]["content"] = "Bruk `kode`, ${navn} og \\n.\nNy linje."

    page = render_about(validate_config(full_document))

    assert "content={`Bruk \\`kode\\`, \\${navn} og \\\\n.\nNy linje.`}" in page


def test_about_page_without_about_section(minimal_document: dict) -> None:
    page = render_about(validate_config(minimal_document))

    assert 'title={"Om oss"}' in page
    assert "content={``}" in page
    assert "values={[]}" in page


def test_contact_page_uses_company_fields(full_document: dict) -> None:
    page = render_contact(validate_config(full_document))

    assert page.startswith('import { ContactPage, Layout } from "@/components";')
    assert '"email": "post@acme.no"' in page
    assert '"address": "Storgata 1, 0155 Oslo"' in page


def test_contacts_are_not_rendered(full_document: dict) -> None:
    site = render_site(validate_config(full_document))

    for text in (site.home, site.services, site.about, site.contact):
        assert "Ola Nordmann" not in text


def test_every_page_has_nav_and_footer(full_document: dict) -> None:
    site = render_site(validate_config(full_document))

    for text in (site.home, site.services, site.about, site.contact):
        assert "const NAV_LINKS = [" in text
        assert '{ label: "Om oss", href: "/om-oss" },' in text
        assert 'description: "Kvalitet til avtalt tid",' in text
        assert 'const PRIMARY_COLOR = "#112233";' in text


def test_only_home_header_is_transparent(full_document: dict) -> None:
    site = render_site(validate_config(full_document))

    assert "transparent: true" in site.home
    for text in (site.services, site.about, site.contact):
        assert "transparent" not in text


def test_rendering_is_deterministic(full_document: dict) -> None:
    first = render_site(validate_config(full_document))
    second = render_site(validate_config(full_document))

    assert first == second


def test_template_literal_escaping() -> None:
    assert template_literal("a`b") == "`a\\`b`"
    assert template_literal("${x}") == "`\\${x}`"
    assert template_literal("back\\slash") == "`back\\\\slash`"
    assert template_literal("$5") == "`$5`"


def test_js_value_indents_continuation_lines() -> None:
    assert js_value(["a"], 4) == '[\n      "a"\n    ]'
    assert js_value([], 4) == "[]"
