from rest_framework import permissions


class IsRequestOwnerOrReadOnly(permissions.BasePermission):
    """
    Permission: Only the buyer who posted a request can edit/delete it.
    Anyone can read requests.
    """

    message = 'You can only modify your own requests.'

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True

        return obj.buyer_id == request.user.id


class IsOfferParticipant(permissions.BasePermission):
    """
    Permission: An offer is visible to its seller and to the buyer who
    owns the request it answers.
    """

    message = 'You do not have access to this offer.'

    def has_object_permission(self, request, view, obj):
        return request.user.id in (obj.seller_id, obj.request.buyer_id)
