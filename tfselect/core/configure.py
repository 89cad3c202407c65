"""
Interactive selection of infra root, environment, region and module.

Used by `edit` and `init --interactive`. Each step's default comes from
the previously stored record, so the steps run strictly in order.
"""

import logging
from pathlib import Path
from typing import Iterable

from .directory_scanner import build_choices, list_subdirectories
from .errors import IncompleteConfig
from .state_store import ConfigurationRecord
from ..ui.prompter import Prompter

logger = logging.getLogger(__name__)

RESERVED_ENVIRONMENT_DIRS = ("terraform",)


class ConfigurationFlow:
    """Prompts for a new configuration record."""

    def __init__(
        self,
        prompter: Prompter,
        cwd: Path,
        reserved: Iterable[str] = RESERVED_ENVIRONMENT_DIRS,
    ):
        self.prompter = prompter
        self.cwd = Path(cwd)
        self.reserved = tuple(reserved)

    def run(self, previous: ConfigurationRecord) -> ConfigurationRecord:
        """
        Walk through all prompts and return the new record.

        Raises:
            IncompleteConfig: If environment selection is cancelled
            FileNotFoundError: If the infra root does not exist
        """
        infra_path = self._infra_dir(previous)
        environment = self._environment(previous, infra_path)
        region = self._region(previous, infra_path, environment)
        module = self._module(previous)

        record = ConfigurationRecord(
            environment=environment,
            region=region,
            module=module,
            infra_dir=str(infra_path),
        )
        logger.info(f"Selected {record}")
        return record

    def _infra_dir(self, previous: ConfigurationRecord) -> Path:
        infra_dir = self.prompter.input_text("Infra Dir", default=previous.infra_dir)
        return (self.cwd / infra_dir).resolve(strict=True)

    def _environment(self, previous: ConfigurationRecord, infra_path: Path) -> str:
        items = build_choices(
            list_subdirectories(infra_path),
            previous=previous.environment,
            exclude=self.reserved,
        )
        if not items:
            logger.error(f"No environments found under {infra_path}")
            raise IncompleteConfig("environment")

        index = self.prompter.select_one("Environment", items, default_index=0)
        if index is None:
            raise IncompleteConfig("environment")
        return items[index]

    def _region(self, previous: ConfigurationRecord, infra_path: Path, environment: str) -> str:
        items = build_choices(
            list_subdirectories(infra_path / environment),
            previous=previous.region,
        )

        index = self.prompter.select_one(
            "Select region or <ESC> for text input", items, default_index=0
        )
        if index is not None:
            return items[index]

        # Cancelled select falls back to free text
        return self.prompter.input_text("Region", default=items[0])

    def _module(self, previous: ConfigurationRecord) -> str:
        return self.prompter.input_text(
            "Module",
            default=previous.module,
            initial=self.cwd.name or previous.module,
        )
