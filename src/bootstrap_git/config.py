"""Configuration loading for bootstrap-git.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Required variables:
- BOOTSTRAP_TEMPLATE_ROOT
- BOOTSTRAP_TARGET_ROOT

Optional variables with defaults:
- GIT_AUTHOR_NAME (default: 'TheSmiths')
- GIT_AUTHOR_EMAIL (default: 'bootstrap@thesmiths.local')
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_AUTHOR_NAME = "TheSmiths"
DEFAULT_AUTHOR_EMAIL = "bootstrap@thesmiths.local"


@dataclass(frozen=True)
class OrchestratorConfig:
    """Filesystem locations an orchestrator works with.

    ``template_root`` holds the boilerplate sources and ``target_root`` is the
    project directory being brought under version control.  Neither is
    validated here; a missing directory surfaces as a failed step.
    """

    template_root: Path
    target_root: Path


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    template_root: Path
    target_root: Path
    git_author_name: str
    git_author_email: str
    log_level: str

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  Raises `RuntimeError` if
        required variables are missing.
        """
        load_dotenv()
        missing = []

        template_root = os.getenv("BOOTSTRAP_TEMPLATE_ROOT")
        if not template_root:
            missing.append("BOOTSTRAP_TEMPLATE_ROOT")

        target_root = os.getenv("BOOTSTRAP_TARGET_ROOT")
        if not target_root:
            missing.append("BOOTSTRAP_TARGET_ROOT")

        if missing:
            raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}")

        return cls(
            template_root=Path(template_root),
            target_root=Path(target_root),
            git_author_name=os.getenv("GIT_AUTHOR_NAME") or DEFAULT_AUTHOR_NAME,
            git_author_email=os.getenv("GIT_AUTHOR_EMAIL") or DEFAULT_AUTHOR_EMAIL,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def orchestrator_config(self) -> OrchestratorConfig:
        """Return the immutable roots record handed to the orchestrator."""
        return OrchestratorConfig(template_root=self.template_root, target_root=self.target_root)
