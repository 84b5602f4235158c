from rest_framework import permissions


class IsReviewAuthorOrReadOnly(permissions.BasePermission):
    """
    Permission: Only review author can edit/delete their review.
    Anyone can read reviews.
    """

    def has_object_permission(self, request, view, obj):
        # Read permissions are allowed for any request
        if request.method in permissions.SAFE_METHODS:
            return True

        # Write permissions only for review author
        return obj.buyer_id == request.user.id


class IsProductSeller(permissions.BasePermission):
    """
    Permission: Only the seller of the reviewed product may respond.
    """

    message = 'Only the seller can respond to reviews.'

    def has_object_permission(self, request, view, obj):
        return obj.product.seller_id == request.user.id
