"""tests/unit/test_version.py"""

import url_builder


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(url_builder.__version__, str)
    assert len(url_builder.__version__) > 0
    # Basic semver-ish check
    assert url_builder.__version__.count(".") >= 1
