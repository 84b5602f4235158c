from rest_framework import permissions


class IsListingSellerOrReadOnly(permissions.BasePermission):
    """
    Permission: Only the listing's seller can edit/delete it.
    Anyone can read listings.
    """

    message = 'You can only modify your own listings.'

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True

        return obj.seller_id == request.user.id
