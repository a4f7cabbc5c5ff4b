from eya.version import version, version_major, version_minor, version_patch


def test_version_string():
    assert version() == "1.0.0"


def test_version_parts_match_string():
    parts = [int(p) for p in version().split(".")]
    assert parts == [version_major(), version_minor(), version_patch()]


def test_version_parts_non_negative():
    assert min(version_major(), version_minor(), version_patch()) >= 0
    assert version_major() == 1