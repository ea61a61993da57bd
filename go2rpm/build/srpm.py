"""Source RPM build via rpmbuild."""

import logging
from pathlib import Path
from typing import Optional

from go2rpm.exceptions import BuildError
from go2rpm.exec import CommandRunner


logger = logging.getLogger(__name__)


def rpmbuild_command(spec_path: Path):
    """rpmbuild invocation that downloads Source0 and builds only the SRPM."""
    return ['rpmbuild', '--define', '_disable_source_fetch 0', '-bs', str(spec_path)]


def build_srpm(spec_path: Path, runner: Optional[CommandRunner] = None) -> str:
    """
    Build a source RPM from a spec file.

    Returns:
        rpmbuild's standard output (it names the written package)

    Raises:
        BuildError: If rpmbuild fails or is not installed
    """
    runner = runner or CommandRunner()
    logger.info(f"Building source RPM from {spec_path}")

    result = runner.run(rpmbuild_command(spec_path))
    if not result.ok:
        raise BuildError(f"Could not create the SRPM: {result.describe()}", stderr=result.stderr)

    for line in result.stdout.splitlines():
        if line.startswith('Wrote:'):
            logger.info(line)
    return result.stdout
