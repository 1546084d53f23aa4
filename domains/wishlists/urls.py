from django.urls import re_path

from .views import WishlistViewSet

# (method → action) 명시 매핑
wishlist_collection = WishlistViewSet.as_view(
    {"get": "list", "post": "create", "put": "update"}
)
wishlist_detail = WishlistViewSet.as_view({"get": "retrieve", "delete": "destroy"})

urlpatterns = [
    re_path(r"^wishlists/?$", wishlist_collection, name="wishlist-list"),
    re_path(r"^wishlists/(?P<pk>[0-9]+)/?$", wishlist_detail, name="wishlist-detail"),
]
