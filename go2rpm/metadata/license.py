"""License detection from documentation files."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

import yaml

from go2rpm.exceptions import LicenseRulesError, ValidationError


logger = logging.getLogger(__name__)

FIXME_LICENSE = 'XXX: FIXME: Determine proper license'
DEFAULT_RULES_PATH = Path(__file__).with_name('licenses.yaml')


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


@dataclass
class LicenseSignature:
    """A license and the phrases that identify its text."""
    license_id: str
    phrases: List[str]

    def matches(self, text: str) -> bool:
        # Phrases may be wrapped across lines in the license text
        flat = normalize_whitespace(text)
        return all(normalize_whitespace(phrase) in flat for phrase in self.phrases)


class LicenseRulesLoader:
    """Loads and validates the license signature table."""

    SUPPORTED_VERSIONS = {"1"}

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, rules_path: Path = DEFAULT_RULES_PATH) -> List[LicenseSignature]:
        """Load signatures from a YAML file."""
        try:
            with open(rules_path, 'r', encoding='utf-8') as f:
                document = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load license rules: {e}")
            self._raise_validation_errors()

        return self.parse(document)

    def parse(self, document: Any) -> List[LicenseSignature]:
        """Validate an already-parsed rules document."""
        self.errors = []

        if not isinstance(document, dict):
            self._add_error("License rules must be a YAML object/dictionary")
            self._raise_validation_errors()

        version = document.get('version')
        if version not in self.SUPPORTED_VERSIONS:
            self._add_error(f"Unsupported version '{version}'. Supported: {self.SUPPORTED_VERSIONS}")

        entries = document.get('licenses')
        if not isinstance(entries, list) or not entries:
            self._add_error("'licenses' field is required and must be a non-empty list")
            self._raise_validation_errors()

        signatures = []
        for i, entry in enumerate(entries):
            signature = self._parse_entry(entry, f"licenses[{i}]")
            if signature:
                signatures.append(signature)

        if self.errors:
            self._raise_validation_errors()

        return signatures

    def _parse_entry(self, entry: Any, path: str) -> Optional[LicenseSignature]:
        if not isinstance(entry, dict):
            self._add_error("License entry must be a dictionary", path)
            return None

        license_id = entry.get('id')
        if not isinstance(license_id, str) or not license_id.strip():
            self._add_error("'id' is required and must be a non-empty string", path)
            return None

        phrases = entry.get('phrases')
        if not isinstance(phrases, list) or not phrases:
            self._add_error(f"License '{license_id}' needs a non-empty 'phrases' list", path)
            return None

        for j, phrase in enumerate(phrases):
            if not isinstance(phrase, str) or not phrase:
                self._add_error("Phrase must be a non-empty string", f"{path}.phrases[{j}]")
                return None

        return LicenseSignature(license_id=license_id.strip(), phrases=list(phrases))

    def _add_error(self, message: str, path: str = ""):
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self):
        raise LicenseRulesError(self.errors)


def detect_license(text: str, signatures: List[LicenseSignature]) -> Optional[str]:
    """Identifier of the last signature matching text, if any."""
    found = None
    for signature in signatures:
        if signature.matches(text):
            found = signature.license_id
    return found


def guess_license(
    documents: Iterable[Tuple[str, str]],
    signatures: Optional[List[LicenseSignature]] = None,
) -> str:
    """
    Guess the package license from (name, text) pairs of doc files.

    The last document with a recognisable license decides.
    """
    if signatures is None:
        signatures = LicenseRulesLoader().load()

    license_id = FIXME_LICENSE
    for name, text in documents:
        found = detect_license(text, signatures)
        if found:
            logger.info(f"{name} looks like a {found} license")
            license_id = found
    return license_id
