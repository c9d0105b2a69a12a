"""Test utilities for urlshort handlers::

    from urlshort.testing import TestClient, assert_redirect
"""

from urlshort.testing.assertions import assert_not_redirected, assert_redirect
from urlshort.testing.client import TestClient

__all__ = ["TestClient", "assert_not_redirected", "assert_redirect"]
