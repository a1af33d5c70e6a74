from models.base_model import Base
from models.user import User
from models.refresh_token import RefreshToken
from models.transaction import Transaction, TransactionKind
from models.db_storage import DBStorage

__all__ = ["Base", "User", "RefreshToken", "Transaction", "TransactionKind", "DBStorage"]
