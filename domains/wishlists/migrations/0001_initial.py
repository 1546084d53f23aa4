import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Wishlist",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("creation_date", models.DateField(blank=True, null=True)),
                ("hidden", models.BooleanField(blank=True, null=True)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="wishlists",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "wishlist",
                "indexes": [
                    models.Index(fields=["user", "id"], name="wishlist_user_id_idx")
                ],
            },
        ),
        migrations.CreateModel(
            name="ProductId",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("product_id", models.IntegerField(blank=True, null=True)),
                ("price", models.IntegerField(blank=True, null=True)),
                ("price_two", models.IntegerField(blank=True, null=True)),
                ("product_id_two", models.DecimalField(decimal_places=2, max_digits=10)),
                (
                    "wish_list",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="product_ids",
                        to="wishlists.wishlist",
                    ),
                ),
                (
                    "wish_list_two",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="product_ids_two",
                        to="wishlists.wishlist",
                    ),
                ),
            ],
            options={
                "db_table": "product_id",
            },
        ),
    ]
