"""awsid - look up AWS account IDs by account alias."""


def _get_version():
    """Get the version from package metadata or pyproject.toml."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("awsid")
    except PackageNotFoundError:
        # Fallback for running from a source checkout
        import re
        from pathlib import Path

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if not pyproject_path.exists():
            return "0.0.0"

        with open(pyproject_path, "r", encoding="utf-8") as f:
            content = f.read()
            version_match = re.search(r'version\s*=\s*["\']([^"\']+)["\']', content)
            if not version_match:
                return "0.0.0"
            return version_match.group(1)


__version__ = _get_version()

__all__ = ["__version__"]
