import json
from pathlib import Path

import pytest

from sitegen import pipeline
from sitegen.config import ConfigError, validate_config


def test_generate_from_document(tmp_path: Path, template_dir: Path, minimal_document: dict) -> None:
    report = pipeline.generate_site(minimal_document, template_dir, tmp_path / "sites")

    assert report.root == (tmp_path / "sites" / "acme-as").resolve()
    home = (report.root / "src/app/page.tsx").read_text(encoding="utf-8")
    assert 'title={"Acme AS"}' in home


def test_generate_from_file(tmp_path: Path, template_dir: Path, full_document: dict) -> None:
    path = tmp_path / "site.json"
    path.write_text(json.dumps(full_document, ensure_ascii=False), encoding="utf-8")

    report = pipeline.generate_site(path, template_dir, tmp_path / "sites")

    assert report.slug == "acme-as"
    assert report.manifest_patched


def test_generate_from_site_config(tmp_path: Path, template_dir: Path, minimal_document: dict) -> None:
    config = validate_config(minimal_document)

    report = pipeline.generate_site(config, template_dir, tmp_path / "sites")

    assert report.slug == config.slug


def test_invalid_color_writes_nothing(tmp_path: Path, template_dir: Path, minimal_document: dict) -> None:
    minimal_document["branding"]["primaryColor"] = "#zzzzzz"
    output_root = tmp_path / "sites"

    with pytest.raises(ConfigError) as exc:
        pipeline.generate_site(minimal_document, template_dir, output_root)

    assert exc.value.field == "branding.primaryColor"
    assert not (output_root / "acme-as").exists()
    assert not output_root.exists()


def test_missing_name_stops_before_rendering(
    tmp_path: Path,
    template_dir: Path,
    minimal_document: dict,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    del minimal_document["company"]["name"]
    monkeypatch.setattr(pipeline, "render_site", lambda *_args, **_kwargs: pytest.fail("render_site called"))
    monkeypatch.setattr(
        pipeline, "materialize_project", lambda *_args, **_kwargs: pytest.fail("materialize_project called")
    )

    with pytest.raises(ConfigError) as exc:
        pipeline.generate_site(minimal_document, template_dir, tmp_path / "sites")

    assert exc.value.field == "company.name"


def test_describe_config(minimal_document: dict) -> None:
    rows = dict(pipeline.describe_config(validate_config(minimal_document)))

    assert rows["Slug"] == "acme-as"
    assert rows["Accent color"] == "#112233"
    assert rows["About section"] == "no"
