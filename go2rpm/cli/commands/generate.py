"""Generate command implementation."""

import logging
from argparse import Namespace
from pathlib import Path

from go2rpm.exceptions import Go2RpmError
from go2rpm.pipeline import GeneratorOptions, SpecGenerator


logger = logging.getLogger(__name__)

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'error': logging.ERROR,
}


def configure_logging(args: Namespace) -> None:
    """Set up stderr logging from the CLI flags."""
    log_level = LOG_LEVELS[args.log_level]
    if args.debug or args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.ERROR

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def options_from_args(args: Namespace) -> GeneratorOptions:
    """Map parsed CLI arguments onto generator options."""
    return GeneratorOptions(
        package=args.pkg,
        spec=Path(args.spec) if args.spec else None,
        srpm=args.srpm,
        workspace=Path(args.workspace).resolve() if args.workspace else None,
    )


def run_generate(args: Namespace, generator: SpecGenerator = None) -> int:
    """
    Generate a spec file (and optionally an SRPM) for args.pkg.

    Returns the process exit status.
    """
    configure_logging(args)
    options = options_from_args(args)
    generator = generator or SpecGenerator()

    try:
        logger.info(f"Generating spec for {options.package}")
        spec_path = generator.generate(options)
        if spec_path and not options.srpm:
            logger.info(f"Spec file written to {spec_path}")
        return 0

    except Go2RpmError as e:
        logger.error(str(e))
        return e.exit_code
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return 1
