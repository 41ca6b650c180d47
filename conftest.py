"""
# Dispatch the project's test functions with pytest.

# Test functions accept a &almanac.test.library.Test instance named `test`.
"""
import pytest

from almanac.test import library

@pytest.fixture
def test(request):
	t = library.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
