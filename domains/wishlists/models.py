from django.conf import settings
from django.db import models


class Wishlist(models.Model):
    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, blank=True, default="")
    creation_date = models.DateField(null=True, blank=True)
    hidden = models.BooleanField(null=True, blank=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="wishlists",
    )

    class Meta:
        db_table = "wishlist"
        indexes = [models.Index(fields=["user", "id"], name="wishlist_user_id_idx")]

    def __str__(self):
        return f"Wishlist{{id={self.id}, name='{self.name}'}}"


class ProductId(models.Model):
    """
    위시리스트에 담긴 상품 참조 행
    - wish_list / wish_list_two : 같은 Wishlist 를 가리키는 두 개의 독립 연관
    - 위시리스트 삭제 시 참조 컬럼만 NULL 로 비우고 행은 유지
    """
    id = models.BigAutoField(primary_key=True)
    product_id = models.IntegerField(null=True, blank=True)
    price = models.IntegerField(null=True, blank=True)
    price_two = models.IntegerField(null=True, blank=True)
    product_id_two = models.DecimalField(max_digits=10, decimal_places=2)
    wish_list = models.ForeignKey(
        Wishlist,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="product_ids",
    )
    wish_list_two = models.ForeignKey(
        Wishlist,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="product_ids_two",
    )

    class Meta:
        db_table = "product_id"

    def __str__(self):
        return f"ProductId{{id={self.id}, product_id={self.product_id}}}"
