"""Initial %changelog entry."""

import logging
import os
import pwd
from datetime import date
from typing import Callable, Optional

from go2rpm.exec import CommandRunner


logger = logging.getLogger(__name__)

FALLBACK_NAME = 'Silvester Standalone'
FALLBACK_EMAIL = 'FIXME'
CHANGELOG_DATE_FORMAT = '%a %b %d %Y'


def git_config(key: str, runner: CommandRunner) -> Optional[str]:
    """Value of a git configuration key, or None if unset."""
    result = runner.run(['git', 'config', key])
    if not result.ok:
        return None
    return result.output or None


def passwd_name() -> Optional[str]:
    """GECOS field of the current user's passwd entry."""
    try:
        gecos = pwd.getpwuid(os.getuid()).pw_gecos
    except KeyError:
        return None
    return gecos.strip() or None


def packager_identity(
    runner: Optional[CommandRunner] = None,
    gecos_lookup: Callable[[], Optional[str]] = passwd_name,
):
    """(name, email) of whoever is running go2rpm."""
    runner = runner or CommandRunner()
    name = git_config('user.name', runner) or gecos_lookup() or FALLBACK_NAME
    email = git_config('user.email', runner) or FALLBACK_EMAIL
    logger.debug(f"Packager identity: {name} <{email}>")
    return name, email


def changelog_entry(
    commit: str,
    name: str,
    email: str,
    today: Optional[date] = None,
) -> str:
    """
    Changelog entry for the first release of a snapshot package.

    Args:
        commit: Full commit hash the package is built from
        name: Packager name
        email: Packager e-mail
        today: Entry date (default: today)

    Returns:
        Two-line entry without a trailing newline
    """
    stamp = (today or date.today()).strftime(CHANGELOG_DATE_FORMAT)
    shortcommit = commit[:7]
    return (
        f"* {stamp} {name} <{email}> - 0-0.1.git{shortcommit}\n"
        f"- Created by go2rpm"
    )
