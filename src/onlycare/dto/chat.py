"""Transfer objects for chat."""

from onlycare.dto.base import TransferObject
from onlycare.dto.user import UserDto


class MessageDto(TransferObject):
    """A single chat message."""

    id: str
    sender_id: str
    receiver_id: str
    message: str
    created_at: str | None = None
    is_read: bool = False


class ConversationDto(TransferObject):
    """Chat list entry: counterpart profile plus last message summary."""

    user: UserDto
    last_message: str | None = None
    last_message_time: str | None = None
    unread_count: int = 0
