"""Top‑level package for bootstrap-git.

This package brings a freshly scaffolded project directory under version
control: it initializes the repository with a boilerplate commit, resets the
working tree to a clean checkout of the primary branch and commits the fully
generated project.  See `README.md` for more information.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
