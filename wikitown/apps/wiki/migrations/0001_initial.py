from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Article",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("slug", models.CharField(max_length=200, unique=True)),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField(blank=True)),
                ("summary", models.CharField(blank=True, max_length=500)),
                ("category", models.CharField(blank=True, db_index=True, max_length=100)),
            ],
            options={
                "ordering": ["title"],
                "indexes": [
                    models.Index(fields=["updated_at"], name="article_updated_at_idx")
                ],
            },
        ),
    ]
