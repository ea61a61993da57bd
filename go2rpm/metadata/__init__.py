"""
Metadata extraction from Go import paths and checkouts.
"""

from .importpath import ForgeInfo, forge_defaults, package_name, fetch_github_summary
from .deps import go_requires, filter_imports, find_go_files
from .docs import find_doc_files, read_doc
from .license import LicenseRulesLoader, LicenseSignature, guess_license, detect_license
from .changelog import changelog_entry, packager_identity

__all__ = [
    'ForgeInfo',
    'forge_defaults',
    'package_name',
    'fetch_github_summary',
    'go_requires',
    'filter_imports',
    'find_go_files',
    'find_doc_files',
    'read_doc',
    'LicenseRulesLoader',
    'LicenseSignature',
    'guess_license',
    'detect_license',
    'changelog_entry',
    'packager_identity',
]
