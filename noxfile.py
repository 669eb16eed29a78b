from __future__ import annotations

from pathlib import Path
import platform
import sys
from typing import TYPE_CHECKING

import nox

if TYPE_CHECKING:
    from nox.sessions import Session

nox.options.default_venv_backend = "uv"
nox.options.reuse_existing_virtualenvs = True

COVER_MIN = 90
PYTHON_VERSIONS = ["3.12", "3.13"]


def constraints(session: Session) -> Path:
    """Generate constraints file path for the session."""
    filename = f"python{session.python}-{sys.platform}-{platform.machine()}.txt"
    return Path("constraints", filename)


def install_project(session: Session, *args: str) -> None:
    """Install ``args`` pinned by the lock file when one exists for this interpreter."""
    lock_file = constraints(session)
    if lock_file.exists():
        session.install("-c", lock_file.as_posix(), *args)
    else:
        session.install(*args)


@nox.session(python=PYTHON_VERSIONS, venv_backend="uv")
def lock(session: Session) -> None:
    """Lock dependencies."""
    filename = constraints(session)
    filename.parent.mkdir(exist_ok=True)
    session.run(
        "uv",
        "pip",
        "compile",
        "pyproject.toml",
        "--upgrade",
        "--quiet",
        "--all-extras",
        f"--output-file={filename}",
    )


@nox.session(python=["3.13"], tags=["lint"])
def lint(session: Session) -> None:
    """Run linting with Ruff."""
    install_project(session, "ruff")
    session.run("ruff", "check", "--fix")


@nox.session(python=["3.13"], tags=["format"])
def format_code(session: Session) -> None:
    """Format code with Ruff."""
    install_project(session, "ruff")
    session.run("ruff", "format")


@nox.session(python=["3.13"], tags=["sort"])
def sort(session: Session) -> None:
    """Sort imports with Ruff."""
    install_project(session, "ruff")
    session.run("ruff", "check", "--select", "I", "--fix")


@nox.session(python=["3.13"], tags=["typing"])
def typing(session: Session) -> None:
    """Run type checking with Pyright."""
    install_project(session, ".[dev]")
    session.run("pyright")


@nox.session(python=PYTHON_VERSIONS, tags=["test"])
def test(session: Session) -> None:
    """Run the unit suite with coverage for every supported interpreter."""
    install_project(session, ".[dev]")
    session.run("pytest", "--cov=patch_chunk", f"--cov-fail-under={COVER_MIN}")


@nox.session(python=["3.13"], tags=["ci"])
def ci(session: Session) -> None:
    """Run all CI checks."""
    session.notify("lint")
    session.notify("sort")
    session.notify("format_code")
    session.notify("typing")
    session.notify("test")
