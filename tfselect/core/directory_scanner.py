"""
Directory listing used to discover environments and regions.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

logger = logging.getLogger(__name__)


def list_subdirectories(path: Union[str, Path]) -> List[str]:
    """
    List the names of the immediate subdirectories of a path.

    Names come back in filesystem enumeration order. Entries whose
    metadata lookup fails are skipped.

    Raises:
        OSError: If path cannot be opened as a directory
    """
    names = []
    with os.scandir(path) as entries:
        for entry in entries:
            try:
                if entry.is_dir():
                    names.append(entry.name)
            except OSError as e:
                logger.debug(f"Skipping {entry.path}: {e}")
    return names


def build_choices(
    names: Iterable[str],
    previous: Optional[str] = None,
    exclude: Iterable[str] = (),
) -> List[str]:
    """
    Turn directory names into an ordered list of choices.

    Names are sorted, excluded names dropped, the previous selection
    placed first, and duplicates removed keeping the first occurrence.
    """
    excluded = set(exclude)
    items = sorted(name for name in names if name not in excluded)

    if previous is not None:
        items.insert(0, previous)

    seen = set()
    choices = []
    for item in items:
        if item not in seen:
            seen.add(item)
            choices.append(item)
    return choices
