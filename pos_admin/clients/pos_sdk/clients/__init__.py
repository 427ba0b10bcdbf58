from .auth_client import AuthClient
from .items_client import ItemsClient
from .reports_client import ReportsClient
from .transactions_client import TransactionsClient

__all__ = ["AuthClient", "ItemsClient", "ReportsClient", "TransactionsClient"]
