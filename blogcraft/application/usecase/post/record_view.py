"""Record view use case."""

from pydantic import BaseModel

from blogcraft.domain.service import ViewCounter
from blogcraft.domain.value import PostId

from ..base import BaseUseCase


class RecordViewRequest(BaseModel):
    """Record view request."""

    post_id: int


class RecordViewUseCase(BaseUseCase[RecordViewRequest, None]):
    """Use case for counting one view of a post.

    Meant to run after the response is sent; it never raises.
    """

    def __init__(self, view_counter: ViewCounter) -> None:
        """Initialize record view use case.

        Args:
            view_counter: View counting service
        """
        self.view_counter = view_counter

    async def execute(self, request: RecordViewRequest) -> None:
        """Execute record view flow."""
        await self.view_counter.record_view(PostId(request.post_id))
