from django.test import RequestFactory, TestCase

from accounts.identity import resolve, resolve_request
from core.authentication import ExternalPrincipal
from core.tests.helpers import make_user


class ResolveTests(TestCase):
    def setUp(self):
        self.alice = make_user("alice", "auth0|alice")

    def test_known_subject_resolves(self):
        self.assertEqual(resolve("auth0|alice"), self.alice)

    def test_unknown_or_empty_subject_is_none(self):
        self.assertIsNone(resolve("auth0|nobody"))
        self.assertIsNone(resolve(""))
        self.assertIsNone(resolve(None))


class ResolveRequestTests(TestCase):
    def setUp(self):
        self.alice = make_user("alice", "auth0|alice")
        self.request = RequestFactory().get("/")

    def test_no_principal_is_none(self):
        self.request.user = None
        self.assertIsNone(resolve_request(self.request))

    def test_resolution_is_memoised_per_request(self):
        self.request.user = ExternalPrincipal("auth0|alice")
        with self.assertNumQueries(1):
            first = resolve_request(self.request)
            second = resolve_request(self.request)
        self.assertEqual(first, self.alice)
        self.assertIs(first, second)
        self.assertIs(self.request.connectly_user, first)

    def test_missing_account_is_memoised_too(self):
        self.request.user = ExternalPrincipal("auth0|nobody")
        with self.assertNumQueries(1):
            self.assertIsNone(resolve_request(self.request))
            self.assertIsNone(resolve_request(self.request))
