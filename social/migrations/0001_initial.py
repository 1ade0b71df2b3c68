import uuid

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("accounts", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Follower",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "user",
                    models.ForeignKey(
                        db_column="user_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="followers",
                        to="accounts.user",
                    ),
                ),
                (
                    "follower",
                    models.ForeignKey(
                        db_column="follower_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="following",
                        to="accounts.user",
                    ),
                ),
            ],
            options={
                "db_table": "followers",
                "indexes": [
                    models.Index(fields=["follower"], name="followers_follower_idx"),
                    models.Index(fields=["user"], name="followers_user_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("user", "follower"), name="uniq_followers_user_follower"),
                    models.CheckConstraint(
                        condition=models.Q(("user", models.F("follower")), _negated=True),
                        name="chk_followers_not_self",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Post",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now, editable=False)),
                (
                    "user",
                    models.ForeignKey(
                        db_column="user_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="posts",
                        to="accounts.user",
                    ),
                ),
            ],
            options={
                "db_table": "posts",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["-created_at"], name="posts_created_at_idx"),
                    models.Index(fields=["user", "-created_at"], name="posts_user_created_at_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("content", ""), _negated=True),
                        name="chk_posts_content_not_empty",
                    ),
                ],
            },
        ),
    ]
