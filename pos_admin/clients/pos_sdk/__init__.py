from .attachments import ImageAttachment
from .config import ClientConfig, ConfigError, load_config
from .envelope import Envelope
from .exceptions import ApiError, ApplicationError, RequestFailedError, TransportError, UnauthenticatedError
from .http_client import HttpClient
from .models import (
    Item,
    ItemPayload,
    LoginData,
    PageRequest,
    Session,
    StockReportRow,
    Transaction,
    TransactionEntry,
    TransactionLine,
    TransactionRequest,
)
from .session import ApiSession
from .session_store import SessionStore

__all__ = [
    "ApiError",
    "ApiSession",
    "ApplicationError",
    "ClientConfig",
    "ConfigError",
    "Envelope",
    "HttpClient",
    "ImageAttachment",
    "Item",
    "ItemPayload",
    "LoginData",
    "PageRequest",
    "RequestFailedError",
    "Session",
    "SessionStore",
    "StockReportRow",
    "Transaction",
    "TransactionEntry",
    "TransactionLine",
    "TransactionRequest",
    "TransportError",
    "UnauthenticatedError",
    "load_config",
]
