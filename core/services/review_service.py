# =============================================================================
# core/services/review_service.py - Review Business Logic
# =============================================================================
# Review-specific rules on top of the generic CRUD service:
# - one review per (author, pos) pair
# - reviews must reference an existing POS
# - authors cannot approve their own reviews
# - a review is approved once approval_count reaches the configured quorum
#
# approve() is a read-increment-write. It is only safe under concurrent
# approvals if the review port serializes writes to the same review.
# =============================================================================

import logging

from app.exceptions import DomainValidationError
from core.models import ApprovalConfiguration, Review
from core.ports.data import PosDataService, ReviewDataService, UserDataService
from core.services.crud_service import CrudService

logger = logging.getLogger(__name__)


class ReviewService(CrudService[Review, int]):
    """
    Service for review submission, retrieval and approval.

    Example:
        service = ReviewService(review_port, user_port, pos_port,
                                ApprovalConfiguration(min_count=3))
        review = service.upsert(Review(pos=pos, author=author, review="Great!"))
        review = service.approve(review, other_user.id)
    """

    def __init__(
        self,
        review_data_service: ReviewDataService,
        user_data_service: UserDataService,
        pos_data_service: PosDataService,
        approval_configuration: ApprovalConfiguration,
    ):
        super().__init__(Review, review_data_service)
        self.review_data_service = review_data_service
        self.user_data_service = user_data_service
        self.pos_data_service = pos_data_service
        self.approval_configuration = approval_configuration

    def upsert(self, review: Review) -> Review:
        """
        Submit a new review or update an existing one.

        Args:
            review: Review without ID (submission) or with ID (update)

        Returns:
            The persisted review

        Raises:
            NotFoundError: If the POS (or, on update, the review) doesn't exist
            DomainValidationError: If the author already reviewed this POS
        """
        pos = self.pos_data_service.get_by_id(review.pos.id)

        existing = self.review_data_service.filter_by_author(pos, review.author)
        # The review being updated may show up in its own author filter
        if any(other.id != review.id for other in existing):
            logger.warning(
                f"Rejected review: user {review.author.id} already reviewed POS {pos.id}"
            )
            raise DomainValidationError(
                "author already reviewed this venue",
                details={"pos_id": pos.id, "author_id": review.author.id},
            )

        return super().upsert(review)

    def filter(self, pos_id: int, approved: bool) -> list[Review]:
        """
        Get the reviews of a POS by approval status.

        Raises:
            NotFoundError: If the POS doesn't exist
        """
        pos = self.pos_data_service.get_by_id(pos_id)
        return self.review_data_service.filter_by_approval(pos, approved)

    def update_approval_status(self, review: Review) -> Review:
        """Return a copy of the review with `approved` recomputed from its count."""
        approved = review.approval_count >= self.approval_configuration.min_count
        return review.model_copy(update={"approved": approved})

    def approve(self, review: Review, user_id: int) -> Review:
        """
        Record one approval of a review by a user.

        Only the review's ID is taken from the argument; the count and flag
        come from the stored review.

        Args:
            review: The review to approve
            user_id: ID of the approving user

        Returns:
            The persisted review with the incremented count

        Raises:
            NotFoundError: If the user or the review doesn't exist
            DomainValidationError: If the user is the review's author
        """
        user = self.user_data_service.get_by_id(user_id)
        stored = self.review_data_service.get_by_id(review.id)

        if user.id == stored.author.id:
            logger.warning(f"Rejected self-approval of review {stored.id} by user {user.id}")
            raise DomainValidationError(
                "author cannot approve own review",
                details={"review_id": stored.id, "user_id": user.id},
            )

        incremented = stored.model_copy(update={"approval_count": stored.approval_count + 1})
        updated = self.update_approval_status(incremented)

        saved = self.review_data_service.upsert(updated)
        logger.info(
            f"User {user.id} approved review {saved.id} "
            f"(count={saved.approval_count}, approved={saved.approved})"
        )
        return saved
