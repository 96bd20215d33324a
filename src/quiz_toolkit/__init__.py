"""Top-level package for the Quiz CSV preview toolkit.

Provides subpackages:
- quiz_toolkit.core – immutable quiz models, serialization, schema validation
- quiz_toolkit.parsing – tolerant quiz CSV parser
- quiz_toolkit.loading – file acquisition with size/type checks
- quiz_toolkit.output – text and PDF previews
"""


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text(encoding="utf-8")
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("quiz-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
