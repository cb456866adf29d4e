"""
Lint Command

Validate a RouterOS script on a device without executing it.
"""

import os
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.text import Text

from roslint.base import BaseCommand
from roslint.constants import (
    INFO_CLEANUP_CONFIRMED,
    REMOTE_SETTLE_DELAY,
    SSH_CONNECTION_TIMEOUT,
    VERSION,
    WARNING_CLEANUP_UNCONFIRMED,
)
from roslint.exceptions import (
    LocalFileNotFoundError,
    RemoteSessionIncompleteError,
    SSHError,
    UploadError,
    UsageError,
)
from roslint.logger import LintLogger
from roslint.models import ConnectionTarget, InvocationConfig, LintStatus, RemoteSessionResult
from roslint.services import (
    SSHService,
    Transport,
    build_parse_command,
    describe_parse_command,
    interpret_output,
)
from roslint.services.result_interpreter import success_message
from roslint.ui_components import PROG_NAME, print_raw_output, show_usage


class LintCommand(BaseCommand):
    """
    Upload a script, parse it on the device and report the outcome.

    Steps run strictly in order; the first failure ends the run with its
    exit status.
    """

    def __init__(
        self,
        config: InvocationConfig,
        transport: Optional[Transport] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        """
        Initialize lint command.

        Args:
            config: Resolved invocation settings
            transport: Transport to the device (defaults to system ssh/scp)
            console: Console for result lines (stdout)
            err_console: Console for log lines (stderr)
        """
        super().__init__(config.verbosity, console=console, err_console=err_console)
        self.config = config
        self.transport = transport or SSHService(config.connection)
        self.result: Optional[RemoteSessionResult] = None

    def execute(self) -> LintStatus:
        """Execute the validation."""
        self.show_header(
            title="Validate Script",
            details={
                "Target": self.config.target,
                "Script": self.config.local_script_path,
            },
        )

        self.validate_local_file()
        self.upload()
        output, returncode = self.run_parse()

        self.result = interpret_output(output, returncode)
        return self.report_result(self.result)

    def validate_local_file(self) -> None:
        """
        Ensure the script is a readable regular file.

        Raises:
            LocalFileNotFoundError: If the path cannot be read
        """
        path = Path(self.config.local_script_path)
        if not path.is_file() or not os.access(path, os.R_OK):
            raise LocalFileNotFoundError(self.config.local_script_path)

    def upload(self) -> None:
        """
        Copy the script to the device.

        Raises:
            UploadError: If scp fails or cannot be started
        """
        host = self.config.target.host
        remote_name = self.config.remote_filename
        self.logger.info(f"Uploading script to {host}:{remote_name}")

        try:
            result = self.transport.upload(self.config.local_script_path, remote_name)
        except SSHError as e:
            raise UploadError("Failed to upload script to router", context=e.message)

        for line in result.output.splitlines():
            self.logger.info(f"scp: {line}")

        if result.is_failure:
            raise UploadError(
                "Failed to upload script to router",
                context=f"scp exited with status {result.returncode}",
            )

    def run_parse(self) -> tuple[str, int]:
        """
        Run the remote parse command.

        Returns:
            Tuple of (combined_output, returncode)

        Raises:
            RemoteSessionIncompleteError: If ssh cannot be started
        """
        remote_name = self.config.remote_filename
        command = build_parse_command(remote_name, settle_delay=self.config.settle_delay)

        self.logger.info(f"Verifying script syntax on {self.config.target.host}")
        self.logger.debug("Commands being executed on RouterOS:")
        for step in describe_parse_command(remote_name):
            self.logger.debug(step)
        self.logger.debug("Full command to execute:")
        self.logger.log_output(command)
        self.logger.debug("Executing SSH command...")

        try:
            result = self.transport.execute(command)
        except SSHError as e:
            raise RemoteSessionIncompleteError(
                "Could not run the remote parse command", context=e.message
            )

        output = result.output
        self.logger.debug(f"Command output (ssh exit status {result.returncode}):")
        self.logger.log_output(output)
        return output, result.returncode

    def report_result(self, result: RemoteSessionResult) -> LintStatus:
        """
        Print the outcome of the remote parse.

        Args:
            result: Interpreted remote session

        Returns:
            Exit status
        """
        if not result.parse_markers_found:
            self.print_error(result.error_message)
            print_raw_output(result.filtered_output, console=self.console)
            return result.exit_status

        if result.error_message:
            self.print_error(result.error_message)
        else:
            self.print_success(success_message(result))

        if result.cleanup_confirmed:
            self.logger.info(INFO_CLEANUP_CONFIRMED)
        else:
            self.logger.warning(WARNING_CLEANUP_UNCONFIRMED)

        return result.exit_status


class LintCommandLine(click.RichCommand):
    """Click command that reports usage errors with the usage text and status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            err_console = Console(stderr=True, highlight=False)
            err_console.print(Text(f"Error: {e.format_message()}", style="red"), soft_wrap=True)
            show_usage(prog_name=ctx.info_name or PROG_NAME)
            ctx.exit(int(LintStatus.USAGE_ERROR))


def _show_help(ctx: click.Context, _param, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    show_usage(prog_name=ctx.info_name or PROG_NAME)
    ctx.exit(int(LintStatus.USAGE_ERROR))


@click.command(
    name=PROG_NAME,
    cls=LintCommandLine,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_help,
    help="Show this help message",
)
@click.option(
    "-v",
    "--verbosity",
    type=click.IntRange(0, 2),
    default=0,
    help="0=results only, 1=info, 2=debug",
)
@click.option(
    "-i", "--identity", "identity_file", default=None, help="SSH identity file (private key)"
)
@click.option(
    "--connect-timeout",
    type=click.IntRange(min=1),
    default=SSH_CONNECTION_TIMEOUT,
    help="SSH connect timeout in seconds",
)
@click.option(
    "--settle-delay",
    type=click.IntRange(min=0),
    default=REMOTE_SETTLE_DELAY,
    help="Seconds the device waits before removing the uploaded file",
)
@click.version_option(version=VERSION, prog_name=PROG_NAME)
@click.argument("connection")
@click.argument("script_path")
@click.pass_context
def lint(
    ctx: click.Context,
    verbosity: int,
    identity_file: Optional[str],
    connect_timeout: int,
    settle_delay: int,
    connection: str,
    script_path: str,
):
    """
    Validate RouterOS script syntax on a device without executing it.

    \b
    Examples:
      roslint -v 1 admin@router.local script.rsc
      roslint -i ~/.ssh/router_id_rsa 192.168.1.1:2222 script.rsc
    """
    try:
        target = ConnectionTarget.parse(connection)
    except UsageError as e:
        LintLogger(verbosity).error(e.message, context=e.context)
        show_usage(prog_name=ctx.info_name or PROG_NAME)
        ctx.exit(int(e.exit_code))

    config = InvocationConfig(
        target=target,
        local_script_path=script_path,
        verbosity=verbosity,
        identity_file=identity_file,
        connect_timeout=connect_timeout,
        settle_delay=settle_delay,
    )
    ctx.exit(LintCommand(config).run())
