"""Go import dependency discovery using `go list`."""

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

from go2rpm.exceptions import ToolNotFoundError
from go2rpm.exec import CommandRunner


logger = logging.getLogger(__name__)

GO_LIST_FORMAT = '{{range .Imports}}{{.}} {{end}}'
SKIP_DIRS = {'.git', '.hg'}


def find_go_files(checkout: Path) -> List[Path]:
    """All *.go files under a checkout, VCS metadata excluded, sorted."""
    found = []
    for root, dirs, files in os.walk(checkout):
        dirs[:] = sorted(d for d in dirs if d not in SKIP_DIRS)
        for name in sorted(files):
            if name.endswith('.go'):
                found.append(Path(root) / name)
    return found


def filter_imports(imports: Iterable[str], import_path: str) -> List[str]:
    """
    Reduce raw imports to third-party requirements.

    Standard library imports carry no dot in their first element and are
    dropped, as are imports of the package itself. The result is
    deduplicated and sorted.
    """
    return sorted({
        imp for imp in imports
        if '.' in imp and not imp.startswith(import_path)
    })


def list_imports(go_file: Path, checkout: Path, runner: CommandRunner) -> List[str]:
    """Imports of a single Go file as reported by `go list`."""
    result = runner.run(['go', 'list', '-f', GO_LIST_FORMAT, str(go_file)], cwd=checkout)
    if result.error and result.error['type'] == 'command_not_found':
        raise ToolNotFoundError("The 'go' tool is required to list package imports")
    if not result.ok:
        logger.warning(f"Skipping {go_file.relative_to(checkout)}: {result.describe()}")
        return []
    return result.stdout.split()


def go_requires(checkout: Path, import_path: str, runner: Optional[CommandRunner] = None) -> List[str]:
    """Third-party import paths required by the sources in a checkout."""
    runner = runner or CommandRunner()
    go_files = find_go_files(checkout)
    logger.info(f"Listing imports of {len(go_files)} Go file(s)")

    imports: List[str] = []
    for go_file in go_files:
        imports.extend(list_imports(go_file, checkout, runner))

    requires = filter_imports(imports, import_path)
    logger.debug(f"Go requirements: {requires}")
    return requires
