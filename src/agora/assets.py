"""Asset discovery for bundled templates and static files.

Locates the Jinja2 templates and static files shipped inside the agora
package.
"""

from importlib.resources import files
from pathlib import Path


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the static directory containing stylesheet and scripts.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    return _package_dir("static")


def get_templates_dir() -> Path:
    """Return path to bundled page templates.

    Raises:
        FileNotFoundError: If templates are not bundled.
    """
    return _package_dir("templates")


def _package_dir(name: str) -> Path:
    directory = files("agora").joinpath(name)
    if not directory.is_dir():
        msg = (
            f"Bundled {name} directory not found. "
            "Reinstall the package with 'pip install -e .'."
        )
        raise FileNotFoundError(msg)
    return Path(str(directory))
