"""Package build helpers."""

from .srpm import build_srpm, rpmbuild_command

__all__ = ['build_srpm', 'rpmbuild_command']
