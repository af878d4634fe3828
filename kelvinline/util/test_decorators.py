import pytest

# Skipped unless pytest is run with --runslow, see tests/conftest.py
slow = pytest.mark.slow
