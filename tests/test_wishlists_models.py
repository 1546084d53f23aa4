from decimal import Decimal

from django.db import IntegrityError

import pytest

from domains.wishlists.models import ProductId, Wishlist


@pytest.mark.django_db
class TestWishlistModel:
    def test_str(self, wishlist_factory):
        w = wishlist_factory(name="gifts")
        assert str(w) == f"Wishlist{{id={w.id}, name='gifts'}}"

    def test_user_delete_cascades(self, user_factory, wishlist_factory):
        u = user_factory()
        w = wishlist_factory(user=u)
        u.delete()
        assert not Wishlist.objects.filter(pk=w.id).exists()


@pytest.mark.django_db
class TestProductIdModel:
    """product_id 테이블 스키마 테스트"""

    def test_nullable_columns(self, product_id_factory):
        p = product_id_factory(product_id_two=Decimal("12.50"))
        p.refresh_from_db()
        assert p.product_id is None
        assert p.price is None
        assert p.price_two is None
        assert p.wish_list is None
        assert p.wish_list_two is None
        assert p.product_id_two == Decimal("12.50")

    def test_product_id_two_is_required(self):
        with pytest.raises(IntegrityError):
            ProductId.objects.create(product_id_two=None)

    def test_two_associations(self, wishlist_factory, product_id_factory):
        a = wishlist_factory()
        b = wishlist_factory()
        p = product_id_factory(wish_list=a, wish_list_two=b, price=100, price_two=90)

        assert list(a.product_ids.all()) == [p]
        assert list(b.product_ids_two.all()) == [p]
        assert not a.product_ids_two.exists()

    def test_wishlist_delete_nulls_references(self, wishlist_factory, product_id_factory):
        """위시리스트 삭제 시 ProductId 행은 남고 참조만 NULL"""
        w = wishlist_factory()
        keep = wishlist_factory()
        p1 = product_id_factory(wish_list=w, wish_list_two=keep)
        p2 = product_id_factory(wish_list_two=w)

        w.delete()

        p1.refresh_from_db()
        p2.refresh_from_db()
        assert p1.wish_list_id is None
        assert p1.wish_list_two_id == keep.id
        assert p2.wish_list_two_id is None
        assert ProductId.objects.count() == 2

    def test_str(self, product_id_factory):
        p = product_id_factory(product_id=5)
        assert str(p) == f"ProductId{{id={p.id}, product_id=5}}"
