import os

from sitegen.config import settings


def test_project_dotenv_overrides_environment(tmp_path, monkeypatch) -> None:
    project_dir = tmp_path / "project"
    project_env = project_dir / ".env"

    project_dir.mkdir()
    project_env.write_text("FIRECRAWL_KEY=project\n", encoding="utf-8")

    monkeypatch.chdir(project_dir)
    monkeypatch.setenv("FIRECRAWL_KEY", "env-value")

    settings._load_dotenv()

    assert os.getenv("FIRECRAWL_KEY") == "project"


def test_secrets_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_OWNER", "acme")
    monkeypatch.setenv("SITEGEN_OUTPUT_DIR", "/tmp/sites")
    settings.get_secrets.cache_clear()
    try:
        secrets = settings.get_secrets()
    finally:
        settings.get_secrets.cache_clear()

    assert secrets.github_owner == "acme"
    assert str(secrets.output_dir) == "/tmp/sites"
