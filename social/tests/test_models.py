"""Database-level constraints on follower edges and posts."""

from django.db import IntegrityError, transaction
from django.test import TestCase

from core.tests.helpers import make_user
from social.models import Follower, Post


class FollowerConstraintTests(TestCase):
    def setUp(self):
        self.alice = make_user("alice")
        self.bob = make_user("bob")

    def test_unique_pair(self):
        Follower.objects.create(user=self.bob, follower=self.alice)
        with self.assertRaises(IntegrityError), transaction.atomic():
            Follower.objects.create(user=self.bob, follower=self.alice)

    def test_reverse_pair_is_distinct(self):
        Follower.objects.create(user=self.bob, follower=self.alice)
        Follower.objects.create(user=self.alice, follower=self.bob)
        self.assertEqual(Follower.objects.count(), 2)

    def test_no_self_follow(self):
        with self.assertRaises(IntegrityError), transaction.atomic():
            Follower.objects.create(user=self.alice, follower=self.alice)

    def test_deleting_user_cascades_edges_and_posts(self):
        Follower.objects.create(user=self.bob, follower=self.alice)
        Post.objects.create(user=self.alice, content="bye")
        self.alice.delete()
        self.assertFalse(Follower.objects.exists())
        self.assertFalse(Post.objects.exists())


class PostConstraintTests(TestCase):
    def test_empty_content_rejected_by_store(self):
        alice = make_user("alice")
        with self.assertRaises(IntegrityError), transaction.atomic():
            Post.objects.create(user=alice, content="")

    def test_default_ordering_newest_first(self):
        alice = make_user("alice")
        first = Post.objects.create(user=alice, content="first")
        second = Post.objects.create(user=alice, content="second")
        Post.objects.filter(pk=first.pk).update(created_at=second.created_at.replace(year=2000))
        self.assertEqual(list(Post.objects.all()), [second, first])
