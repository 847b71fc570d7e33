# =============================================================================
# app/main.py - Application Entry Point
# =============================================================================
# Composition root: configures logging and wires data ports into services.
#
# Usage:
#   from app.main import create_services
#   services = create_services()
#   services.reviews.approve(review, user_id)
# =============================================================================

import logging
from dataclasses import dataclass

from app.config import Settings, get_settings
from core.ports.data import PosDataService, ReviewDataService, UserDataService
from core.services import PosService, ReviewService, UserService
from lib.memory_store import (
    InMemoryPosDataService,
    InMemoryReviewDataService,
    InMemoryUserDataService,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings (DEBUG wins over LOG_LEVEL)."""
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL),
        format=LOG_FORMAT,
    )


@dataclass
class Services:
    """Wired domain services."""
    users: UserService
    pos: PosService
    reviews: ReviewService


def create_services(
    settings: Settings | None = None,
    user_data_service: UserDataService | None = None,
    pos_data_service: PosDataService | None = None,
    review_data_service: ReviewDataService | None = None,
) -> Services:
    """
    Build the domain services.

    Ports that are not supplied default to the in-memory adapters.

    Args:
        settings: Settings to use (defaults to the cached global settings)
        user_data_service: User port
        pos_data_service: POS port
        review_data_service: Review port

    Returns:
        Services container
    """
    settings = settings or get_settings()

    users = user_data_service or InMemoryUserDataService()
    pos = pos_data_service or InMemoryPosDataService()
    reviews = review_data_service or InMemoryReviewDataService()

    approval_configuration = settings.approval_configuration
    logger.info(
        f"Creating services ({settings.ENVIRONMENT}, "
        f"approval min_count={approval_configuration.min_count})"
    )

    return Services(
        users=UserService(users),
        pos=PosService(pos),
        reviews=ReviewService(reviews, users, pos, approval_configuration),
    )
