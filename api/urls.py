# api/urls.py
from django.urls import include, path

urlpatterns = [
    # --- Auth / Account ---
    path("", include(("domains.accounts.urls", "accounts"))),
    # --- Wishlists ---
    path("", include(("domains.wishlists.urls", "wishlists"))),
]
