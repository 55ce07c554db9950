import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

TEMPLATE_FILES = {
    "package.json": json.dumps(
        {
            "name": "template-site",
            "version": "0.1.0",
            "private": True,
            "scripts": {"dev": "next dev", "build": "next build"},
            "dependencies": {"next": "15.0.0", "react": "19.0.0"},
        },
        indent=2,
    )
    + "\n",
    "src/app/globals.css": "/* template stylesheet */\n",
    "src/app/page.tsx": "export default function Home() {\n  return null;\n}\n",
    "src/app/tjenester/page.tsx": "export default function Page() {\n  return null;\n}\n",
    "src/app/om-oss/page.tsx": "export default function Page() {\n  return <p>Om oss</p>;\n}\n",
    "src/app/kontakt/page.tsx": "export default function Page() {\n  return <p>Kontakt</p>;\n}\n",
    "src/app/layout.tsx": "export default function RootLayout({ children }) {\n  return children;\n}\n",
    "src/components/index.ts": 'export * from "./Hero";\n',
    "public/logo.svg": "<svg xmlns=\"http://www.w3.org/2000/svg\"/>\n",
    "README.md": "# Template site\n",
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """
    Write a small template project tree and return its root.
    """
    root = tmp_path / "template"
    for relative, content in TEMPLATE_FILES.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def minimal_document() -> dict:
    return {
        "company": {"name": "Acme AS"},
        "branding": {"primaryColor": "#112233"},
    }


@pytest.fixture
def full_document() -> dict:
    return {
        "company": {
            "name": "Acme AS",
            "fullName": "Acme Holding AS",
            "tagline": "Kvalitet til avtalt tid",
            "phone": "+47 12 34 56 78",
            "email": "post@acme.no",
            "address": "Storgata 1, 0155 Oslo",
        },
        "branding": {"primaryColor": "#112233", "accentColor": "#AABBCC"},
        "pages": {
            "home": {
                "hero": {"title": "Vi bygger", "subtitle": "Siden 1999"},
                "stats": [
                    {"value": "25+", "label": "Års erfaring"},
                    {"value": 300, "label": "Prosjekter"},
                    {"value": "Norge", "label": "Landsdekkende"},
                ],
                "features": [
                    {"title": "Kvalitet", "description": "Vi leverer alltid kvalitet"},
                    {"title": "Kompetanse", "description": "Erfarne fagfolk"},
                ],
            },
            "services": {
                "title": "Tjenester",
                "subtitle": "Dette gjør vi",
                "intro": "Vi tilbyr mye.",
                "services": [
                    {"title": f"Service {letter}", "description": f"Om {letter}", "features": [f"{letter}1", f"{letter}2"]}
                    for letter in "ABCDEFGH"
                ],
            },
            "about": {
                "title": "Historien vår",
                "subtitle": "Velkommen",
                "content": "Vi startet i en garasje.",
                "values": [
                    {"title": "Ærlighet", "description": "Vi sier det som det er"},
                    {"title": "Presisjon", "description": "Vi måler to ganger"},
                ],
            },
            "contact": {"contacts": [{"name": "Ola Nordmann", "role": "Daglig leder"}]},
        },
    }
