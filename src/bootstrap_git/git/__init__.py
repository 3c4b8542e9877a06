"""Git client and orchestration of the bootstrap sequences."""

from .client import GitClient, StageOptions, VCSClient
from .orchestrator import GitOrchestrator, OrchestratorDefaults, StepFailure

__all__ = [
    "GitClient",
    "GitOrchestrator",
    "OrchestratorDefaults",
    "StageOptions",
    "StepFailure",
    "VCSClient",
]
