#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command-line entrypoint: `appmeta encode|decode|keygen|notices`."""

from __future__ import annotations

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from appmeta.commands.decode import decode_command
from appmeta.commands.encode import encode_command
from appmeta.commands.keygen import keygen_command
from appmeta.commands.notices import notices_command
from appmeta.config import AppMetaRuntimeConfig

__version__ = get_version("appmeta", caller_file=__file__)


def _telemetry_for(config: AppMetaRuntimeConfig) -> TelemetryConfig:
    """Environment telemetry settings with appmeta's service name and log level."""
    base = TelemetryConfig.from_env()
    return evolve(
        base,
        service_name="appmeta",
        logging=evolve(base.logging, default_level=config.log_level),  # type: ignore[arg-type]
    )


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="appmeta",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Embed and read typed app metadata in APKs and AABs.

    APK metadata is encrypted per recipient (see `keygen`); AAB metadata is
    stored in the clear. Environment:

    - APPMETA_LOG_LEVEL: trace, debug, info, warning (default), error
    - APPMETA_MAX_DECOMPRESSED_SIZE: byte limit when decoding APK metadata
    - PROVIDE_LOG_FILE: also write logs to this file
    """
    ctx.ensure_object(dict)
    config = AppMetaRuntimeConfig.from_env()
    get_hub().initialize_foundation(_telemetry_for(config))

    ctx.obj["config"] = config
    ctx.obj["cli_context"] = CLIContext.from_env()


cli.add_command(encode_command, name="encode")
cli.add_command(decode_command, name="decode")
cli.add_command(keygen_command, name="keygen")
cli.add_command(notices_command, name="notices")

main = cli

if __name__ == "__main__":
    cli()

# 📦🏷️🔚
