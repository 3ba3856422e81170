"""Top-level package for the Pattern Worksheet builder.

Provides subpackages:
- pattern_worksheet.core - pattern models, validation and serialization
- pattern_worksheet.builder - question distribution and worksheet assembly
- pattern_worksheet.session - pattern picker selection state
"""


def _get_version() -> str:
    """Get version from installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("pattern-worksheet")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["__version__"]
