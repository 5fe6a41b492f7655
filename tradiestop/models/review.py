"""Review models for both directions of feedback."""

from pydantic import Field

from tradiestop.models.base import BaseDataModel


class _ReviewBase(BaseDataModel):
    id: str = Field(..., min_length=1)
    booking_id: str
    reviewer_id: str
    reviewer_name: str = ""
    reviewer_image_url: str = ""
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    date: str = ""


class Review(_ReviewBase):
    """A client's review of the tradie who did the job."""

    tradie_id: str
    tradie_name: str = ""


class ClientReview(_ReviewBase):
    """A tradie's review of the client they worked for."""

    client_id: str
    client_name: str = ""


class ReviewSubmission(BaseDataModel):
    """Body of ``POST /reviews``; the server fills in reviewer and date."""

    booking_id: str
    tradie_id: str
    tradie_name: str = ""
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)


class ClientReviewSubmission(BaseDataModel):
    """Body of ``POST /reviews/client``."""

    booking_id: str
    client_id: str
    client_name: str = ""
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)
