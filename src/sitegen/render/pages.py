"""
TSX page generation for the home, services, about and contact pages.

Each page is assembled from small section builders. A builder returns the
section source indented for the page body, or an empty string when the
section has no backing data; pages join the non-empty sections only.
"""

from __future__ import annotations

from string import Template
from typing import Iterable, Optional, Sequence

from ..config.models import (
    AboutPage,
    CompanyConfig,
    FeatureItem,
    HeroConfig,
    ServicesPage,
    SiteConfig,
    StatItem,
)
from .literals import js_string, js_value, template_literal

NAV_LINKS = (
    ("Tjenester", "/tjenester"),
    ("Om oss", "/om-oss"),
    ("Kontakt", "/kontakt"),
)
CONTACT_HREF = "/kontakt"
ABOUT_HREF = "/om-oss"

DEFAULT_PRIMARY_CTA = "Kontakt oss"
DEFAULT_SECONDARY_CTA = "Les mer"
DEFAULT_SERVICES_TITLE = "Våre tjenester"
DEFAULT_ABOUT_TITLE = "Om oss"
FEATURES_TITLE = "Hvorfor velge oss?"
HOME_SERVICES_LIMIT = 6

SECTION_INDENT = " " * 6
PROP_INDENT = " " * 8

HOME_TEMPLATE = Template("""import {
  Hero,
  Services,
  About,
  Contact,
  CTASection,
  Features,
  Layout
} from "@/components";

const PRIMARY_COLOR = ${primary_color};
const ACCENT_COLOR = ${accent_color};

${nav_links}

export default function Home() {
  return (
    <Layout
${layout_props}
    >
${sections}
    </Layout>
  );
}
""")

PAGE_TEMPLATE = Template("""import { ${component}, Layout } from "@/components";

const PRIMARY_COLOR = ${primary_color};

${nav_links}

export default function Page() {
  return (
    <Layout
${layout_props}
    >
${body}
    </Layout>
  );
}
""")

LAYOUT_PROPS_TEMPLATE = Template("""      headerProps={{
        companyName: ${company_name},
        navLinks: NAV_LINKS,
        ctaText: ${cta_text},
        ctaHref: ${cta_href},
        primaryColor: PRIMARY_COLOR,${header_extra}
      }}
      footerProps={{
        companyName: ${full_name},
        description: ${description},
        contact: ${contact},
        primaryColor: PRIMARY_COLOR,
        columns: [
          {
            title: "Tjenester",
            links: NAV_LINKS
          }
        ]
      }}""")

HERO_TEMPLATE = Template("""      <Hero
        title={${title}}
        subtitle={${subtitle}}
        primaryCta={${primary_cta}}
        primaryCtaHref=${primary_href}
        secondaryCta={${secondary_cta}}
        secondaryCtaHref=${secondary_href}
        primaryColor={PRIMARY_COLOR}
        backgroundImage=""
      />""")

STATS_TEMPLATE = Template("""      <section className="py-16 bg-white">
        <div className="container mx-auto px-4">
          <div className="grid grid-cols-2 md:grid-cols-4 gap-8 text-center">
${entries}
          </div>
        </div>
      </section>""")

STAT_ENTRY_TEMPLATE = Template("""            <div>
              <div className="text-4xl font-bold" style={{ color: PRIMARY_COLOR }}>{${value}}</div>
              <div className="text-gray-600 mt-2">{${label}}</div>
            </div>""")

SERVICES_PREVIEW_TEMPLATE = Template("""      <Services
        title={${title}}
        subtitle={${subtitle}}
        services={${services}}
        primaryColor={PRIMARY_COLOR}
      />""")

ABOUT_TEASER_TEMPLATE = Template("""      <About
        title={${title}}
        content={${content}}
        points={${points}}
        imageUrl=""
        primaryColor={PRIMARY_COLOR}
      />""")

FEATURES_TEMPLATE = Template("""      <Features
        title={${title}}
        features={${features}}
        primaryColor={PRIMARY_COLOR}
      />""")

CTA_SECTION = """      <CTASection
        title="Trenger du våre tjenester?"
        description="Ta kontakt med oss for en uforpliktende samtale om ditt prosjekt."
        ctaText="Kontakt oss"
        ctaHref="/kontakt"
        primaryColor={PRIMARY_COLOR}
      />"""

CONTACT_SECTION_TEMPLATE = Template("""      <Contact
        title="Kontakt oss"
        subtitle="Ta gjerne kontakt med oss"
        primaryColor={PRIMARY_COLOR}
        contactInfo={${contact}}
      />""")

SERVICES_PAGE_TEMPLATE = Template("""      <ServicesPage
        title={${title}}
        subtitle={${subtitle}}
        intro={${intro}}
        services={${services}}
        primaryColor={PRIMARY_COLOR}
      />""")

ABOUT_PAGE_TEMPLATE = Template("""      <AboutPage
        title={${title}}
        subtitle={${subtitle}}
        companyName={${company_name}}
        content={${content}}
        values={${values}}
        primaryColor={PRIMARY_COLOR}
      />""")

CONTACT_PAGE_TEMPLATE = Template("""      <ContactPage
        companyName={${company_name}}
        contact={${contact}}
        primaryColor={PRIMARY_COLOR}
      />""")


# -- Shared scaffolding ---------------------------------------------------


def build_nav_links() -> str:
    """Render the fixed three-item ``NAV_LINKS`` constant."""
    items = "\n".join(f"  {{ label: {js_string(label)}, href: {js_string(href)} }}," for label, href in NAV_LINKS)
    return f"const NAV_LINKS = [\n{items}\n];"


def _contact_literal(company: CompanyConfig, indent: int) -> str:
    contact = {"phone": company.phone, "email": company.email, "address": company.address}
    return js_value(contact, indent)


def build_layout_props(company: CompanyConfig, *, transparent_header: bool = False) -> str:
    """
    Render the ``headerProps``/``footerProps`` attributes shared by every page.

    The footer shows the full company name with the tagline as description.
    """
    return LAYOUT_PROPS_TEMPLATE.substitute(
        company_name=js_string(company.name),
        cta_text=js_string(DEFAULT_PRIMARY_CTA),
        cta_href=js_string(CONTACT_HREF),
        header_extra="\n        transparent: true," if transparent_header else "",
        full_name=js_string(company.full_name),
        description=js_string(company.tagline),
        contact=_contact_literal(company, len(PROP_INDENT)),
    )


def join_sections(sections: Iterable[str]) -> str:
    """Join section blocks with one blank line, dropping empty sections."""
    return "\n\n".join(section for section in sections if section)


# -- Home page sections ---------------------------------------------------


def build_hero_section(hero: HeroConfig, company: CompanyConfig) -> str:
    """Hero block; blank fields fall back to company data and default labels."""
    return HERO_TEMPLATE.substitute(
        title=js_string(hero.title or company.name),
        subtitle=js_string(hero.subtitle or company.tagline or ""),
        primary_cta=js_string(hero.primary_cta or DEFAULT_PRIMARY_CTA),
        primary_href=js_string(CONTACT_HREF),
        secondary_cta=js_string(hero.secondary_cta or DEFAULT_SECONDARY_CTA),
        secondary_href=js_string(ABOUT_HREF),
    )


def build_stats_section(stats: Sequence[StatItem]) -> str:
    if not stats:
        return ""
    entries = "\n".join(
        STAT_ENTRY_TEMPLATE.substitute(value=js_string(stat.value), label=js_string(stat.label))
        for stat in stats
    )
    return STATS_TEMPLATE.substitute(entries=entries)


def build_services_preview(services_page: ServicesPage) -> str:
    """Services teaser with at most ``HOME_SERVICES_LIMIT`` entries, in order."""
    preview = [
        {"title": service.title, "description": service.description}
        for service in services_page.services[:HOME_SERVICES_LIMIT]
    ]
    if not preview:
        return ""
    return SERVICES_PREVIEW_TEMPLATE.substitute(
        title=js_string(services_page.title or DEFAULT_SERVICES_TITLE),
        subtitle=js_string(services_page.subtitle),
        services=js_value(preview, len(PROP_INDENT)),
    )


def build_about_teaser(about: Optional[AboutPage]) -> str:
    if about is None:
        return ""
    return ABOUT_TEASER_TEMPLATE.substitute(
        title=js_string(about.title or DEFAULT_ABOUT_TITLE),
        content=js_string(about.content),
        points=js_value([value.title for value in about.values], len(PROP_INDENT)),
    )


def build_features_section(features: Sequence[FeatureItem]) -> str:
    if not features:
        return ""
    payload = [{"title": feature.title, "description": feature.description} for feature in features]
    return FEATURES_TEMPLATE.substitute(
        title=js_string(FEATURES_TITLE),
        features=js_value(payload, len(PROP_INDENT)),
    )


def build_cta_section() -> str:
    return CTA_SECTION


def build_contact_section(company: CompanyConfig) -> str:
    return CONTACT_SECTION_TEMPLATE.substitute(contact=_contact_literal(company, len(PROP_INDENT)))


# -- Pages ----------------------------------------------------------------


def render_home(config: SiteConfig) -> str:
    """
    Render ``src/app/page.tsx``.

    Section order is fixed: hero, stats, services preview, about teaser,
    features, call to action, contact. Stats, services, about and features
    only appear when the config has data for them.
    """
    company = config.company
    home = config.pages.home
    sections = join_sections(
        [
            build_hero_section(home.hero, company),
            build_stats_section(home.stats),
            build_services_preview(config.pages.services),
            build_about_teaser(config.pages.about),
            build_features_section(home.features),
            build_cta_section(),
            build_contact_section(company),
        ]
    )
    return HOME_TEMPLATE.substitute(
        primary_color=js_string(config.branding.primary_color),
        accent_color=js_string(config.branding.accent_color),
        nav_links=build_nav_links(),
        layout_props=build_layout_props(company, transparent_header=True),
        sections=sections,
    )


def _render_page(config: SiteConfig, component: str, body: str) -> str:
    return PAGE_TEMPLATE.substitute(
        component=component,
        primary_color=js_string(config.branding.primary_color),
        nav_links=build_nav_links(),
        layout_props=build_layout_props(config.company),
        body=body,
    )


def render_services(config: SiteConfig) -> str:
    """Render the services page with every configured service, untruncated."""
    services_page = config.pages.services
    services = [service.model_dump(mode="json") for service in services_page.services]
    body = SERVICES_PAGE_TEMPLATE.substitute(
        title=js_string(services_page.title or DEFAULT_SERVICES_TITLE),
        subtitle=js_string(services_page.subtitle),
        intro=js_string(services_page.intro),
        services=js_value(services, len(PROP_INDENT)),
    )
    return _render_page(config, "ServicesPage", body)


def render_about(config: SiteConfig) -> str:
    """Render the about page. Only value titles are shown, not descriptions."""
    about = config.pages.about or AboutPage()
    body = ABOUT_PAGE_TEMPLATE.substitute(
        title=js_string(about.title or DEFAULT_ABOUT_TITLE),
        subtitle=js_string(about.subtitle),
        company_name=js_string(config.company.name),
        content=template_literal(about.content),
        values=js_value([value.title for value in about.values], len(PROP_INDENT)),
    )
    return _render_page(config, "AboutPage", body)


def render_contact(config: SiteConfig) -> str:
    body = CONTACT_PAGE_TEMPLATE.substitute(
        company_name=js_string(config.company.name),
        contact=_contact_literal(config.company, len(PROP_INDENT)),
    )
    return _render_page(config, "ContactPage", body)
