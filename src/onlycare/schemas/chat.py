"""Pandera schemas for exported chat tables."""

import pandera.pandas as pa
from pandera.typing import Series


class MessageFrameSchema(pa.DataFrameModel):
    """Schema for chat messages."""

    id: Series[str]
    sender_id: Series[str]
    receiver_id: Series[str]
    content: Series[str]
    timestamp: Series[int] = pa.Field(ge=0, description="Epoch milliseconds")
    is_read: Series[bool]

    class Config:
        """Schema configuration."""

        name = "MessageFrameSchema"
        strict = False
        coerce = True


class ConversationFrameSchema(pa.DataFrameModel):
    """Schema for the chat list."""

    user_id: Series[str]
    user_name: Series[str]
    last_message_time: Series[int] = pa.Field(ge=0)
    user_image: Series[str]
    last_message: Series[str]
    unread_count: Series[int] = pa.Field(ge=0)
    is_online: Series[bool]

    class Config:
        """Schema configuration."""

        name = "ConversationFrameSchema"
        strict = False
        coerce = True
