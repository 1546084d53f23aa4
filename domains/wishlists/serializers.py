from rest_framework import serializers

from domains.wishlists.models import Wishlist


class WishlistSerializer(serializers.ModelSerializer):
    # id 유무로 생성/수정을 구분하므로 쓰기 가능 + null 허용
    id = serializers.IntegerField(required=False, allow_null=True)
    user = serializers.PrimaryKeyRelatedField(read_only=True)
    user_login = serializers.SerializerMethodField()

    class Meta:
        model = Wishlist
        fields = ("id", "name", "creation_date", "hidden", "user", "user_login")

    def get_user_login(self, obj):
        return obj.user.get_username() if obj.user_id else None
