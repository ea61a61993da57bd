"""
Spec generation pipeline.

Collects metadata for an import path into a substitution mapping, renders
the spec template and optionally builds a source RPM.
"""

import logging
import sys
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Dict, Iterator, List, Optional, TextIO, Union

from go2rpm.build import build_srpm
from go2rpm.exceptions import SpecWriteError
from go2rpm.exec import CommandRunner
from go2rpm.metadata import (
    changelog_entry,
    find_doc_files,
    forge_defaults,
    go_requires,
    guess_license,
    packager_identity,
    read_doc,
)
from go2rpm.metadata.importpath import SummaryFetcher
from go2rpm.metadata.license import LicenseSignature
from go2rpm.scm import Checkout
from go2rpm.template import SPEC_TEMPLATE, SpecRenderer


logger = logging.getLogger(__name__)

Substitutions = Dict[str, Union[str, List[str]]]


@dataclass
class GeneratorOptions:
    """What to generate and where to put it."""
    package: str
    spec: Optional[Path] = None
    srpm: bool = False
    workspace: Optional[Path] = None


@contextmanager
def workspace_dir(workspace: Optional[Path]) -> Iterator[Path]:
    """The given workspace, or a temporary one removed on exit."""
    if workspace is not None:
        workspace.mkdir(parents=True, exist_ok=True)
        yield workspace
        return

    with tempfile.TemporaryDirectory(prefix='go2rpm-') as tmpdir:
        logger.debug(f"Using temporary workspace: {tmpdir}")
        yield Path(tmpdir)


class SpecGenerator:
    """
    Builds the substitution mapping for one import path.

    External collaborators are injectable so the pipeline can run
    against fakes.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        summary_fetcher: Optional[SummaryFetcher] = None,
        signatures: Optional[List[LicenseSignature]] = None,
        today: Optional[date] = None,
    ):
        self.runner = runner or CommandRunner()
        self.checkout = Checkout(self.runner)
        self.summary_fetcher = summary_fetcher
        self.signatures = signatures
        self.today = today
        self.renderer = SpecRenderer()

    def collect_metadata(self, package: str, workspace: Path) -> Substitutions:
        """
        Gather every value the spec template needs.

        Raises:
            Go2RpmError: On any clone, commit or doc file failure
        """
        forge = forge_defaults(package, self.summary_fetcher)
        substs: Substitutions = {
            'PKG': package,
            'NAME': forge.name,
            'DESCRIPTION': '%{summary}',
            'SUMMARY': forge.summary,
            'SOURCE': forge.source,
            'SETUP': forge.setup,
            'SHORTCOMMIT': str(forge.shortcommit),
        }

        checkout = self.checkout.clone(package, workspace / forge.name)
        substs['COMMIT'] = self.checkout.tip_commit(checkout)
        substs['GOREQUIRES'] = go_requires(checkout, package, self.runner)

        docfiles = find_doc_files(checkout)
        logger.info(f"Documentation files: {', '.join(docfiles) or 'none'}")
        substs['DOCFILES'] = docfiles
        substs['LICENSE'] = guess_license(
            ((name, read_doc(checkout / name)) for name in docfiles),
            self.signatures,
        )

        name, email = packager_identity(self.runner)
        substs['CHANGELOG'] = changelog_entry(substs['COMMIT'], name, email, self.today)

        return substs

    def render(self, substs: Substitutions) -> str:
        """Render the spec template, refusing unfilled placeholders."""
        return self.renderer.render_strict(SPEC_TEMPLATE, substs)

    def generate(self, options: GeneratorOptions, stdout: Optional[TextIO] = None) -> Optional[Path]:
        """
        Run the whole pipeline.

        Returns:
            Path of the written spec file, or None if it went to stdout
        """
        with workspace_dir(options.workspace) as workspace:
            substs = self.collect_metadata(options.package, workspace)
            text = self.render(substs)

            spec_path = options.spec
            if spec_path is None and options.srpm:
                spec_path = workspace / f"{substs['NAME']}.spec"

            if spec_path is None:
                out = stdout or sys.stdout
                out.write(text)
                out.flush()
            else:
                write_spec(spec_path, text)

            if options.srpm:
                build_srpm(spec_path, self.runner)

            return spec_path


def write_spec(spec_path: Path, text: str) -> None:
    """Write a rendered spec file."""
    try:
        spec_path.parent.mkdir(parents=True, exist_ok=True)
        spec_path.write_text(text, encoding='utf-8')
    except OSError as e:
        raise SpecWriteError(f"{spec_path}: {e.strerror or e}")
    logger.info(f"Wrote {spec_path}")


def generate(options: GeneratorOptions, stdout: Optional[TextIO] = None) -> Optional[Path]:
    """Generate a spec (and optionally an SRPM) with default collaborators."""
    return SpecGenerator().generate(options, stdout)
