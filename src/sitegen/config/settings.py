"""
Settings/secret loading helpers.
"""

from __future__ import annotations

import os
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Secrets(BaseModel):
    """
    Credentials and defaults for the collaborators around the generator.

    The generator core never reads these; the CLI passes them explicitly to
    the scrape and publish helpers.

    Attributes:
        firecrawl_key: API key for the Firecrawl scrape endpoint.
        github_token: Token used to create and push repositories.
        github_owner: Account that owns published repositories.
        template_dir: Default template project tree.
        output_dir: Default directory for generated projects.
    """
    firecrawl_key: Optional[str] = Field(default=None, alias="FIRECRAWL_KEY")
    github_token: Optional[str] = Field(default=None, alias="GITHUB_TOKEN")
    github_owner: Optional[str] = Field(default=None, alias="GITHUB_OWNER")
    template_dir: Optional[Path] = Field(default=None, alias="SITEGEN_TEMPLATE_DIR")
    output_dir: Optional[Path] = Field(default=None, alias="SITEGEN_OUTPUT_DIR")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_secrets() -> Secrets:
    """
    Load secrets from environment/.env exactly once.

    Returns:
        A Secrets object populated from environment variables.
    """
    values = {field.alias: os.getenv(field.alias) for field in Secrets.model_fields.values()}
    return Secrets(**values)
