"""Lookup of installed package metadata."""

import logging
import re
from importlib import metadata
from typing import Dict, Iterable

logger = logging.getLogger(__name__)

def _normalize(name: str) -> str:
    # Same folding pip uses for project names
    return re.sub(r"[-_.]+", "-", name).lower()

def get_package_versions(pkg_names: Iterable[str]) -> Dict[str, str]:
    """
    Get the installed version for each requested package.

    Args:
        pkg_names: Distribution names, e.g. ["pandas", "shapely"]

    Returns:
        Dictionary with the requested names as keys and versions as values.
        Names that are not installed are left out.

    Example:
        >>> get_package_versions(["pandas", "not-a-package"])
        {'pandas': '2.2.2'}
    """
    wanted = {_normalize(name): name for name in pkg_names}
    result = {}

    for dist in metadata.distributions():
        dist_name = dist.metadata['Name']
        if not dist_name:
            continue

        requested = wanted.get(_normalize(dist_name))
        if requested is not None and requested not in result:
            result[requested] = dist.version

    missing = set(wanted.values()) - set(result)
    if missing:
        logger.debug(f"Packages not installed: {', '.join(sorted(missing))}")

    return result
