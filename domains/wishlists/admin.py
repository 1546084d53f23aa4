from django.contrib import admin

from .models import ProductId, Wishlist


class ProductIdInline(admin.TabularInline):
    model = ProductId
    fk_name = "wish_list"
    extra = 0


@admin.register(Wishlist)
class WishlistAdmin(admin.ModelAdmin):
    inlines = (ProductIdInline,)
    list_display = ("id", "name", "user", "creation_date", "hidden")
    list_filter = ("hidden",)
    search_fields = ("name", "user__username", "user__email")


@admin.register(ProductId)
class ProductIdAdmin(admin.ModelAdmin):
    list_display = ("id", "product_id", "product_id_two", "price", "price_two", "wish_list", "wish_list_two")
    search_fields = ("product_id",)
