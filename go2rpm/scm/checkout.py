"""
Repository checkout for git and Mercurial.
"""

import logging
from pathlib import Path
from typing import Optional

from go2rpm.exceptions import CloneError, CommitNotFoundError
from go2rpm.exec import CommandRunner


logger = logging.getLogger(__name__)


class Checkout:
    """
    Fetches an import path into a local directory and reports its tip.

    An existing destination directory is reused as is.
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        self.runner = runner or CommandRunner()

    def clone(self, import_path: str, destination: Path) -> Path:
        """
        Clone https://<import_path> into destination.

        Raises:
            CloneError: If neither git nor hg can clone the repository
        """
        if destination.is_dir():
            logger.info(f"Reusing existing checkout: {destination}")
            return destination

        url = f"https://{import_path}"
        attempts = [
            ['git', 'clone', url, str(destination)],
            ['hg', 'clone', url, str(destination)],
        ]

        failures = []
        for argv in attempts:
            logger.info(f"Cloning {url} with {argv[0]}")
            result = self.runner.run(argv)
            if result.ok:
                return destination
            failures.append(result.describe())
            logger.debug(f"{argv[0]} clone failed: {result.describe()}")

        raise CloneError(f"Error cloning repository {url}: " + "; ".join(failures))

    def scm(self, path: Path) -> Optional[str]:
        """'git', 'hg' or None for a local checkout."""
        if (path / '.git').is_dir():
            return 'git'
        if (path / '.hg').is_dir():
            return 'hg'
        return None

    def tip_commit(self, path: Path) -> str:
        """
        Full hash of the topmost commit of a checkout.

        Raises:
            CommitNotFoundError: If the checkout is not git or hg, or the
                commit cannot be read
        """
        scm = self.scm(path)
        if scm == 'git':
            argv = ['git', f"--git-dir={path / '.git'}", 'log', '--format=%H', '-1']
        elif scm == 'hg':
            argv = ['hg', '--repository', str(path), '--debug', 'id', '-i']
        else:
            raise CommitNotFoundError(f"Unable to determine topmost commit: {path} is not a git or hg checkout")

        result = self.runner.run(argv)
        commit = result.output if result.ok else ""
        if not commit:
            raise CommitNotFoundError(f"Unable to determine topmost commit: {result.describe()}")

        logger.info(f"Topmost commit: {commit}")
        return commit
