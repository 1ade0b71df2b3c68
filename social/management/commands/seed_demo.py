"""
Seed demo data for local development.

What it creates
---------------
- Users "alice", "bob" and "carol" bound to the external ids
  `demo|alice`, `demo|bob`, `demo|carol` (mint dev tokens with those subjects).
- Follow edges: alice -> bob, alice -> carol, bob -> alice.
- A few posts per user with staggered `created_at` so feeds have a visible order.

Idempotent-ish: users and edges use `get_or_create`; posts are only created for
users that have none. `--reset` deletes all social data and demo users first.

Usage
-----
    python manage.py seed_demo
    python manage.py seed_demo --reset --posts 10
"""

from __future__ import annotations

from datetime import timedelta
from typing import Dict

from django.core.management.base import BaseCommand, CommandParser
from django.db import transaction
from django.utils import timezone

from accounts.models import User
from social.models import Follower, Post

DEMO_USERNAMES = ("alice", "bob", "carol")
DEMO_EDGES = (("alice", "bob"), ("alice", "carol"), ("bob", "alice"))


class Command(BaseCommand):
    help = "Seed demo users, follow edges and posts. Use --reset to clear existing social data first."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--reset",
            action="store_true",
            default=False,
            help="Delete posts, edges and demo users before seeding.",
        )
        parser.add_argument(
            "--posts",
            type=int,
            default=3,
            help="Posts to create per user (only for users without posts).",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["reset"]:
            self._reset()

        users = self._ensure_users()
        self.stdout.write(self.style.SUCCESS(f"Users ready: {', '.join(users)}"))

        for follower_name, followed_name in DEMO_EDGES:
            Follower.objects.get_or_create(user=users[followed_name], follower=users[follower_name])

        now = timezone.now().replace(microsecond=0)
        created = 0
        for offset, user in enumerate(users.values()):
            if Post.objects.filter(user=user).exists():
                continue
            for i in range(max(0, options["posts"])):
                Post.objects.create(
                    user=user,
                    content=f"Post {i + 1} from {user.username}",
                    created_at=now - timedelta(minutes=10 * i + offset),
                )
                created += 1

        self.stdout.write(self.style.SUCCESS(f"Seeding complete ({created} posts created)."))

    def _reset(self) -> None:
        Post.objects.all().delete()
        Follower.objects.all().delete()
        User.objects.filter(username__in=DEMO_USERNAMES).delete()
        self.stdout.write(self.style.WARNING("Existing social data deleted."))

    def _ensure_users(self) -> Dict[str, User]:
        users: Dict[str, User] = {}
        for name in DEMO_USERNAMES:
            user, _ = User.objects.get_or_create(external_id=f"demo|{name}", defaults={"username": name})
            users[name] = user
        return users
