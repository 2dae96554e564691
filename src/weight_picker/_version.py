"""Minimal version helper for the weight_picker package."""

from importlib import metadata

PACKAGE_NAME = "weight-picker"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:  # dev checkout
        import setuptools_scm  # type: ignore[import-untyped]

        return str(
            setuptools_scm.get_version(
                root="../..",
                relative_to=__file__,
                fallback_version=FALLBACK_VERSION,
            )
        )


__all__ = ["get_version"]
