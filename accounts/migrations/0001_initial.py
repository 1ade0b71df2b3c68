import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("username", models.CharField(max_length=150, unique=True)),
                ("external_id", models.CharField(editable=False, max_length=255, unique=True)),
            ],
            options={
                "db_table": "users",
                "ordering": ["username"],
            },
        ),
    ]
