"""Version utility for reading application version."""

import os
from importlib import metadata
from pathlib import Path

from snowhook.utils.logger import get_module_logger

logger = get_module_logger(__name__)

DISTRIBUTION_NAME = "alertmanager-webhook-servicenow"


def get_version() -> str:
    """
    Get the application version.
    
    Resolution order: APP_VERSION environment variable (set in the container
    image), a VERSION file next to the package, the installed distribution
    metadata, and finally 'dev'.
    
    Returns:
        Version string
    """
    version = os.getenv("APP_VERSION")
    if version:
        return version
    
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        try:
            return version_file.read_text().strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(
                f"Failed to read VERSION file at {version_file}: {type(e).__name__}: {e}"
            )
    
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass
    
    return "dev"


# Module-level version constant
VERSION: str = get_version()
