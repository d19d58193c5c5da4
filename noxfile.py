import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

# Packages with C extensions that must be rebuilt per Python version.
_C_EXT_PACKAGES = ["psycopg2"]

_AREAS = ["identity", "catalogue", "ordering", "payments", "promotions", "charity", "dashboard"]


def _install(session: nox.Session) -> None:
    """Install the project with its test extra into the nox virtualenv."""
    session.install("-e", ".[test]")
    # Force-rebuild C-extension packages so the .so matches this Python version.
    session.run(
        "pip",
        "install",
        "--force-reinstall",
        "--no-cache-dir",
        *_C_EXT_PACKAGES,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no infrastructure required)."""
    _install(session)
    session.run("pytest", "-m", "domain", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_fast(session: nox.Session) -> None:
    """Everything except the slower HTTP integration tests."""
    _install(session)
    session.run("pytest", "-m", "not slow", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
@nox.parametrize("area", _AREAS)
def tests_area(session: nox.Session, area: str) -> None:
    """Run one bounded context's tests, e.g. ``nox -s "tests_area(area='charity')"``."""
    _install(session)
    session.run("pytest", f"tests/{area}/", *session.posargs)

