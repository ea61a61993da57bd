"""Tests for license signature loading and license guessing."""

import pytest
import yaml

from go2rpm.exceptions import LicenseRulesError
from go2rpm.metadata.license import (
    FIXME_LICENSE,
    LicenseRulesLoader,
    LicenseSignature,
    detect_license,
    guess_license,
)


@pytest.fixture
def signatures():
    return LicenseRulesLoader().load()


def test_packaged_rules_load(signatures):
    assert [s.license_id for s in signatures] == ["MIT", "BSD"]
    assert len(signatures[0].phrases) == 5
    assert len(signatures[1].phrases) == 2


def test_detects_mit(signatures, mit_text):
    assert detect_license(mit_text, signatures) == "MIT"


def test_detects_bsd(signatures, bsd_text):
    assert detect_license(bsd_text, signatures) == "BSD"


def test_partial_mit_text_not_detected(signatures, mit_text):
    partial = mit_text.replace("substantial portions of the Software", "")
    assert detect_license(partial, signatures) is None


def test_guess_defaults_to_fixme(signatures):
    assert guess_license([("README.md", "# hello\n")], signatures) == FIXME_LICENSE


def test_guess_no_documents(signatures):
    assert guess_license([], signatures) == FIXME_LICENSE


def test_last_matching_document_wins(signatures, mit_text, bsd_text):
    docs = [("COPYING", bsd_text), ("LICENSE", mit_text), ("README.md", "nothing here")]
    assert guess_license(docs, signatures) == "MIT"


def test_later_signature_wins_within_document(signatures, mit_text, bsd_text):
    assert detect_license(mit_text + bsd_text, signatures) == "BSD"


def test_guess_loads_packaged_rules_by_default(mit_text):
    assert guess_license([("LICENSE", mit_text)]) == "MIT"


def test_signature_matches_all_phrases():
    signature = LicenseSignature(license_id="X", phrases=["alpha", "beta"])
    assert signature.matches("alpha and beta")
    assert not signature.matches("alpha only")


class TestLicenseRulesLoader:
    """Validation of the license rules document."""

    def test_load_custom_file(self, tmp_path):
        rules = tmp_path / "rules.yaml"
        rules.write_text(yaml.safe_dump({
            "version": "1",
            "licenses": [{"id": "ISC", "phrases": ["Permission to use, copy, modify"]}],
        }))

        signatures = LicenseRulesLoader().load(rules)

        assert signatures == [LicenseSignature("ISC", ["Permission to use, copy, modify"])]

    def test_missing_file(self, tmp_path):
        with pytest.raises(LicenseRulesError) as exc_info:
            LicenseRulesLoader().load(tmp_path / "absent.yaml")
        assert "Failed to load license rules" in str(exc_info.value)
        assert exc_info.value.exit_code == 2

    def test_invalid_yaml(self, tmp_path):
        rules = tmp_path / "rules.yaml"
        rules.write_text("licenses: [unclosed\n")
        with pytest.raises(LicenseRulesError):
            LicenseRulesLoader().load(rules)

    def test_not_a_mapping(self):
        with pytest.raises(LicenseRulesError) as exc_info:
            LicenseRulesLoader().parse(["MIT"])
        assert "must be a YAML object" in str(exc_info.value)

    def test_unsupported_version(self):
        with pytest.raises(LicenseRulesError) as exc_info:
            LicenseRulesLoader().parse({"version": "9", "licenses": [{"id": "A", "phrases": ["a"]}]})
        assert "Unsupported version" in str(exc_info.value)

    def test_empty_licenses(self):
        with pytest.raises(LicenseRulesError) as exc_info:
            LicenseRulesLoader().parse({"version": "1", "licenses": []})
        assert "non-empty list" in str(exc_info.value)

    def test_collects_every_entry_error(self):
        document = {
            "version": "1",
            "licenses": [
                {"id": "", "phrases": ["x"]},
                {"id": "A"},
                {"id": "B", "phrases": ["ok", ""]},
                "MIT",
            ],
        }
        with pytest.raises(LicenseRulesError) as exc_info:
            LicenseRulesLoader().parse(document)

        paths = [error.path for error in exc_info.value.errors]
        assert paths == ["licenses[0]", "licenses[1]", "licenses[2].phrases[1]", "licenses[3]"]
