"""Allow running go2rpm as `python -m go2rpm`."""

import sys

from go2rpm.cli.main import main


if __name__ == '__main__':
    sys.exit(main())
