"""go2rpm: draft RPM spec files for Go packages."""

__version__ = '0.1.0'
