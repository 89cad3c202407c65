"""
Command line interface for tfselect.

    tfselect init [--interactive]   terraform init with backend.tfvars
    tfselect edit                   change the stored selections
    tfselect plan                   terraform plan with terraform.tfvars
    tfselect destroy                terraform destroy with terraform.tfvars
"""

import functools
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import click

from . import __version__
from .config import Settings
from .core.configure import ConfigurationFlow
from .core.dispatcher import dispatch
from .core.errors import TfSelectError
from .core.git import get_repo_root
from .core.state_store import ConfigurationRecord, StateStore
from .core.terraform_runner import TerraformRunner
from .ui.prompter import Prompter, QuestionaryPrompter
from .utils import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Collaborators shared by every subcommand."""
    settings: Settings
    state_store: StateStore
    prompter: Prompter
    runner: TerraformRunner
    cwd: Path = field(default_factory=Path.cwd)
    repo_root_resolver: Callable[[Path], Path] = get_repo_root
    _repo_root: Optional[Path] = field(default=None, init=False, repr=False)

    @classmethod
    def from_environment(cls) -> "AppContext":
        settings = Settings()
        setup_logging(settings.get("log_level", "WARNING"), settings.get("log_file", False))
        return cls(
            settings=settings,
            state_store=StateStore(),
            prompter=QuestionaryPrompter(),
            runner=TerraformRunner(settings.terraform_binary),
        )

    def repo_root(self) -> Path:
        # git is asked once per run
        if self._repo_root is None:
            self._repo_root = self.repo_root_resolver(self.cwd)
        return self._repo_root

    def load(self) -> ConfigurationRecord:
        return self.state_store.load(self.repo_root(), self.cwd)

    def save(self, record: ConfigurationRecord):
        self.state_store.save(self.repo_root(), record)

    def configure(self, previous: ConfigurationRecord) -> ConfigurationRecord:
        """Run the interactive flow and persist its result."""
        flow = ConfigurationFlow(
            self.prompter,
            self.cwd,
            reserved=self.settings.reserved_environment_dirs,
        )
        record = flow.run(previous)
        self.save(record)
        return record

    def run(self, command: str, record: ConfigurationRecord) -> int:
        return dispatch(
            command,
            record,
            self.runner,
            check_module_dir=self.settings.check_module_dir,
        )


def handle_errors(f):
    """Turn fatal errors into a printed message and a non-zero exit."""
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (TfSelectError, OSError) as e:
            logger.debug("Fatal error", exc_info=True)
            raise click.ClickException(str(e)) from e
        except KeyboardInterrupt:
            sys.exit(130)
    return wrapper


@click.group()
@click.version_option(__version__, prog_name="tfselect")
@click.pass_context
def cli(ctx):
    """Run terraform against the environment/region/module selected for this repository."""
    if ctx.obj is None:
        ctx.obj = AppContext.from_environment()


@cli.command()
@click.option("-i", "--interactive", is_flag=True, help="Choose environment, region and module first.")
@click.pass_obj
@handle_errors
def init(app: AppContext, interactive: bool):
    """terraform init with the module's backend.tfvars."""
    record = app.load()
    if interactive:
        record = app.configure(record)
    sys.exit(app.run("init", record))


@cli.command()
@click.pass_obj
@handle_errors
def edit(app: AppContext):
    """Change the stored selections."""
    app.configure(app.load())


@cli.command()
@click.pass_obj
@handle_errors
def plan(app: AppContext):
    """terraform plan with the module's terraform.tfvars."""
    sys.exit(app.run("plan", app.load()))


@cli.command()
@click.pass_obj
@handle_errors
def destroy(app: AppContext):
    """terraform destroy with the module's terraform.tfvars."""
    sys.exit(app.run("destroy", app.load()))


def main():
    """Entry point for command line interface."""
    cli(prog_name="tfselect")


if __name__ == "__main__":
    main()
