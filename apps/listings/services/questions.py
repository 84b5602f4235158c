"""Product Q&A service: buyer questions and seller answers."""

from django.db import transaction
from django.db.models import Prefetch, QuerySet
from uuid import UUID

from apps.accounts.models import User
from apps.notifications.models import NotificationType
from apps.notifications.services import notify_on_commit
from ..models import Product, ProductQuestion
from .exceptions import (
    ListingNotFoundError,
    QuestionNotFoundError,
    UnauthorizedQuestionActionError,
    InvalidQuestionError,
)


def get_questions(*, product_id: UUID) -> QuerySet[ProductQuestion]:
    """
    Top-level questions of a product, newest first.

    Each question carries its seller answers (oldest first) in
    ``question.answers.all()``.
    """
    answers = ProductQuestion.objects.filter(
        is_seller_answer=True,
    ).select_related('author', 'author__profile').order_by('created_at')

    return (
        ProductQuestion.objects
        .filter(product_id=product_id, parent__isnull=True, is_seller_answer=False)
        .select_related('author', 'author__profile')
        .prefetch_related(Prefetch('answers', queryset=answers))
        .order_by('-created_at')
    )


@transaction.atomic
def create_question(*, product_id: UUID, author: User, content: str) -> ProductQuestion:
    """
    Ask a public question about a product.

    The seller is notified unless they asked it themselves.

    Raises:
        ListingNotFoundError: If product doesn't exist
    """
    try:
        product = Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ListingNotFoundError(f"Listing {product_id} not found")

    question = ProductQuestion.objects.create(
        product=product,
        author=author,
        content=content,
        is_seller_answer=False,
    )

    if product.seller_id != author.id:
        notify_on_commit(
            user_id=product.seller_id,
            type=NotificationType.NEW_QUESTION,
            title='New Question',
            message=f'Someone asked a question about "{product.title}"',
            link=f'/products/{product.id}',
        )

    return question


@transaction.atomic
def create_seller_answer(*, question_id: UUID, author: User, content: str) -> ProductQuestion:
    """
    Answer a question on one of the seller's products.

    Raises:
        QuestionNotFoundError: If the question doesn't exist
        InvalidQuestionError: If the target is itself an answer
        UnauthorizedQuestionActionError: If author is not the product's seller
    """
    try:
        question = ProductQuestion.objects.select_related('product').get(id=question_id)
    except ProductQuestion.DoesNotExist:
        raise QuestionNotFoundError("Question not found")

    if question.parent_id is not None or question.is_seller_answer:
        raise InvalidQuestionError("Answers can only be posted to questions")

    if question.product.seller_id != author.id:
        raise UnauthorizedQuestionActionError("Only the seller can answer questions")

    return ProductQuestion.objects.create(
        product=question.product,
        author=author,
        content=content,
        is_seller_answer=True,
        parent=question,
    )


@transaction.atomic
def delete_question(*, question_id: UUID, user: User) -> None:
    """
    Delete a question or answer (author only). Answers go with the question.

    Raises:
        QuestionNotFoundError: If the question doesn't exist
        UnauthorizedQuestionActionError: If user is not the author
    """
    try:
        question = ProductQuestion.objects.select_for_update().get(id=question_id)
    except ProductQuestion.DoesNotExist:
        raise QuestionNotFoundError("Question not found")

    if question.author_id != user.id:
        raise UnauthorizedQuestionActionError("You can only delete your own questions")

    question.delete()
