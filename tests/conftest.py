"""Shared pytest fixtures for scripthelp tests."""

import pytest

SAMPLE_SCRIPT = """\
# Global comment
# For the file
function cmd_alpha() {
  # alpha does something
  :
}

# Comment for beta
beta()
{
  # beta details
  :
}

# A function without prefix
plain() { :; }
"""


@pytest.fixture
def write_script(tmp_path):
    """Factory writing script text to a file and returning its path."""

    def _write(text: str, name: str = "script.sh"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_script(write_script):
    """Script with a prefixed, a next-line-brace and a one-line function."""
    return write_script(SAMPLE_SCRIPT, "sample.sh")
