#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Third-party notices command for the appmeta CLI."""

from __future__ import annotations

from importlib import resources

import click
from provide.foundation.console import perr, pout

from appmeta.config.defaults import NOTICES_RESOURCE_NAME
from appmeta.console import get_command_logger

log = get_command_logger("notices")


@click.command("notices")
def notices_command() -> None:
    """Displays third-party notices."""
    try:
        notices = resources.files("appmeta").joinpath(NOTICES_RESOURCE_NAME).read_text(encoding="utf-8")
    except OSError as e:
        log.error("Failed to retrieve third party notices", error=str(e))
        perr("❌ Failed to retrieve third party notices.")
        raise click.Abort() from e
    pout(notices)


# 📦🏷️🔚
