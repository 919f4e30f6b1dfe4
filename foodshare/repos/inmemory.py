# foodshare/repos/inmemory.py
import uuid
from typing import Optional, Dict

from foodshare.core.errors import DuplicateAccount
from foodshare.models.account import Account, normalize_email

def _id() -> str:
    return uuid.uuid4().hex

class InMemoryIdentityStore:
    """Accounts keyed by normalized email, alive for the lifetime of the process."""

    def __init__(self):
        self.accounts: Dict[str, Account] = {}

    def new_id(self) -> str:
        return _id()

    async def find_by_email(self, email: str) -> Optional[Account]:
        return self.accounts.get(normalize_email(email))

    async def exists(self, email: str) -> bool:
        return normalize_email(email) in self.accounts

    async def insert(self, account: Account) -> Account:
        key = normalize_email(account.email)
        if key in self.accounts:
            raise DuplicateAccount()
        account = account.model_copy(update={"email": key})
        self.accounts[key] = account
        return account

    async def close(self):
        self.accounts.clear()

    def __len__(self) -> int:
        return len(self.accounts)
