"""Global constants for bootstrap-git.

These values serve as defaults for the orchestrator and the command runner.
Override the environment variables rather than editing the values here.
"""

import os

# Branch and commit messages
PRIMARY_BRANCH = os.environ.get("PRIMARY_BRANCH", "master")
BOILERPLATE_COMMIT_MESSAGE = "TheSmiths boilerplate"
BOOTSTRAP_COMMIT_MESSAGE = "Add autogenerated bootstrap project"

# Template layout, relative to the template root
GITIGNORE_TEMPLATE = ("project_files", "gitignore")
README_TEMPLATE = ("component_files", "README.md")

# Limits
GIT_COMMAND_TIMEOUT_S = int(os.environ.get("GIT_COMMAND_TIMEOUT_S", 120))
TIMEOUT_EXIT_CODE = 124
