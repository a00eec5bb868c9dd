from .loader import load_chat_log
from .models import ChatLog, MessageKind, ParsedMessage, RawMessage
from .parser import classify_message, is_out_of_character, parse_messages

__all__ = [
    "ChatLog",
    "MessageKind",
    "ParsedMessage",
    "RawMessage",
    "classify_message",
    "is_out_of_character",
    "load_chat_log",
    "parse_messages",
]
