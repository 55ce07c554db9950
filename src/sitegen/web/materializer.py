"""
Materialize a site by cloning the template project and overwriting its
stylesheet, pages and manifest.
"""

from __future__ import annotations

import json
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..config import SiteConfig
from ..render import RenderedSite, render_site
from ..util import ensure_directory, file_lock, write_text_file

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_ROOT = Path("outputs/sites")
STYLESHEET_PATH = Path("src/app/globals.css")
PAGE_PATHS: Dict[str, Path] = {
    "home": Path("src/app/page.tsx"),
    "services": Path("src/app/tjenester/page.tsx"),
    "about": Path("src/app/om-oss/page.tsx"),
    "contact": Path("src/app/kontakt/page.tsx"),
}
MANIFEST_PATH = Path("package.json")
REGISTRY_FILENAME = ".sitegen.json"


class TemplateMissingError(RuntimeError):
    """Raised when the template project tree (or its manifest) does not exist."""


class ConflictError(RuntimeError):
    """Raised when the output path already holds a project for another company."""


class FileSystemError(RuntimeError):
    """
    Raised when copying or writing fails part-way through materialization.

    The output tree may be partially written and must be regenerated or
    removed by hand.
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass
class MaterializeReport:
    """
    Stores what happened when a site was materialized.

    Attributes:
        root: Absolute path of the generated project.
        slug: Project slug (directory and manifest name).
        files_written: Files overwritten after cloning, in write order.
        manifest_patched: True once the manifest name was rewritten.
        config_unchanged: True when the previous run for this slug recorded
            the same company and config hash.
    """
    root: Path
    slug: str
    files_written: List[Path] = field(default_factory=list)
    manifest_patched: bool = False
    config_unchanged: bool = False

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Output", str(self.root))
        yield ("Slug", self.slug)
        yield ("Files written", str(len(self.files_written)))
        yield ("Manifest updated", "yes" if self.manifest_patched else "no")
        yield ("Config changed", "no" if self.config_unchanged else "yes")


def resolve_output_path(config: SiteConfig, output_root: Path | str) -> Path:
    """
    Determine the absolute project directory for a config.

    Args:
        config: The validated site configuration.
        output_root: Directory that holds generated projects.

    Returns:
        ``<output_root>/<slug>`` as an absolute Path.
    """
    return Path(output_root).expanduser().resolve() / config.slug


def check_template(template_root: Path | str) -> Path:
    """
    Make sure the template tree exists and carries a manifest.

    Raises:
        TemplateMissingError: If the directory or its manifest is absent.
    """
    root = Path(template_root).expanduser().resolve()
    if not root.is_dir():
        raise TemplateMissingError(f"Template directory not found: {root}")
    if not (root / MANIFEST_PATH).is_file():
        raise TemplateMissingError(f"Template manifest not found: {root / MANIFEST_PATH}")
    return root


def read_registry(output_root: Path) -> Dict[str, dict]:
    """
    Load the slug registry kept next to the generated projects.

    Maps each slug to the company name (and config hash) that produced it.

    Raises:
        FileSystemError: If the registry exists but cannot be read or parsed.
    """
    path = output_root / REGISTRY_FILENAME
    if not path.exists():
        return {}
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileSystemError(f"Registry {path} is unreadable: {exc}", path) from exc
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FileSystemError(f"Registry {path} is unreadable: {exc}", path) from exc
    if not isinstance(data, dict):
        raise FileSystemError(f"Registry {path} is unreadable: expected a JSON object", path)
    return {slug: entry for slug, entry in data.items() if isinstance(entry, dict)}


def _write_registry(output_root: Path, registry: Dict[str, dict]) -> None:
    target = output_root / REGISTRY_FILENAME
    try:
        write_text_file(target, json.dumps(registry, indent=2, sort_keys=True, ensure_ascii=False) + "\n")
    except OSError as exc:
        raise FileSystemError(f"Failed to update registry {target}: {exc}", target) from exc


def check_conflict(config: SiteConfig, output_path: Path, registry: Dict[str, dict]) -> None:
    """
    Refuse to overwrite a project that belongs to a different company.

    Two company names can share a slug ("Acme AS" and "acme as"); the registry
    remembers which name claimed the directory. A non-empty directory the
    registry does not know about is treated as foreign too.

    Raises:
        ConflictError: If the output path is claimed by another source.
    """
    if not output_path.exists():
        return
    entry = registry.get(config.slug)
    if entry is None:
        if output_path.is_dir() and any(output_path.iterdir()):
            raise ConflictError(
                f"{output_path} already exists and was not generated from a site config; "
                "remove it or use force to overwrite."
            )
        return
    owner = entry.get("company")
    if owner != config.company.name:
        raise ConflictError(
            f"{output_path} was generated for {owner!r}; {config.company.name!r} maps to the same slug "
            f"{config.slug!r}. Remove it or use force to overwrite."
        )


def clone_template(template_root: Path, output_path: Path) -> None:
    """
    Copy the whole template tree into output_path, creating it if needed.

    Existing files in output_path are replaced by their template versions.
    """
    try:
        shutil.copytree(template_root, output_path, dirs_exist_ok=True)
    except OSError as exc:
        raise FileSystemError(f"Failed to copy template into {output_path}: {exc}", output_path) from exc


def _overwrite(target: Path, content: str, report: MaterializeReport) -> None:
    try:
        write_text_file(target, content)
    except OSError as exc:
        raise FileSystemError(f"Failed to write {target}: {exc}", target) from exc
    report.files_written.append(target)


def patch_manifest(output_path: Path, slug: str) -> Path:
    """
    Set the manifest ``name`` to slug, keeping every other field and key order.
    """
    target = output_path / MANIFEST_PATH
    try:
        manifest = json.loads(target.read_text(encoding="utf-8"))
    except OSError as exc:
        raise FileSystemError(f"Failed to read {target}: {exc}", target) from exc
    except json.JSONDecodeError as exc:
        raise FileSystemError(f"Manifest {target} is not valid JSON: {exc}", target) from exc
    if not isinstance(manifest, dict):
        raise FileSystemError(f"Manifest {target} must be a JSON object", target)

    manifest["name"] = slug
    try:
        write_text_file(target, json.dumps(manifest, indent=2, ensure_ascii=False) + "\n")
    except OSError as exc:
        raise FileSystemError(f"Failed to write {target}: {exc}", target) from exc
    return target


def materialize_project(
    config: SiteConfig,
    template_root: Path | str,
    output_root: Path | str = DEFAULT_OUTPUT_ROOT,
    *,
    force: bool = False,
    rendered: Optional[RenderedSite] = None,
) -> MaterializeReport:
    """
    Clone the template and overwrite it with the rendered site.

    Steps run in a fixed order and are not rolled back: clone, stylesheet,
    the four pages, then the manifest name. The run holds a lock on the
    output path so two runs for the same slug cannot interleave.

    Args:
        config: The validated site configuration.
        template_root: Template project tree to clone.
        output_root: Directory that receives ``<slug>/``.
        force: Overwrite even if the output path belongs to another source.
        rendered: Pre-rendered artifacts; rendered from config when omitted.

    Returns:
        A MaterializeReport describing the generated project.

    Raises:
        TemplateMissingError: Before anything is written.
        ConflictError: Before anything is written.
        FileSystemError: Mid-run; the output tree is left partially written.
    """
    template = check_template(template_root)
    output_path = resolve_output_path(config, output_root)
    root_dir = output_path.parent
    slug = config.slug
    rendered = rendered or render_site(config)

    try:
        ensure_directory(root_dir)
    except OSError as exc:
        raise FileSystemError(f"Failed to create {root_dir}: {exc}", root_dir) from exc

    report = MaterializeReport(root=output_path, slug=slug)
    with file_lock(output_path):
        with file_lock(root_dir / REGISTRY_FILENAME):
            registry = read_registry(root_dir)
            if force:
                logger.info("Force enabled; not checking ownership of %s", output_path)
            else:
                check_conflict(config, output_path, registry)
            previous = registry.get(slug) or {}
            if previous.get("company") == config.company.name and previous.get("config_hash") == config.hash:
                report.config_unchanged = True
                logger.info("Config for %s is unchanged since the last run", slug)
            registry[slug] = {"company": config.company.name, "config_hash": config.hash}
            _write_registry(root_dir, registry)

        logger.info("Copying template %s -> %s", template, output_path)
        clone_template(template, output_path)

        logger.info("Writing %s", STYLESHEET_PATH)
        _overwrite(output_path / STYLESHEET_PATH, rendered.stylesheet, report)

        logger.info("Writing pages")
        for page, relative in PAGE_PATHS.items():
            _overwrite(output_path / relative, getattr(rendered, page), report)

        report.files_written.append(patch_manifest(output_path, slug))
        report.manifest_patched = True

    logger.info("Site generated in %s", output_path)
    return report


def materialize(
    config: SiteConfig,
    template_root: Path | str,
    output_root: Path | str = DEFAULT_OUTPUT_ROOT,
    *,
    force: bool = False,
) -> Path:
    """Materialize the site and return the absolute output path."""
    return materialize_project(config, template_root, output_root, force=force).root
