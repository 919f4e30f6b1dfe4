# foodshare/services/auth.py
import asyncio
from typing import Optional

from pydantic import ValidationError

from foodshare.core.errors import (
    AccountNotFound, InvalidCredential, MissingRequiredField,
    AdminRegistrationForbidden, DuplicateAccount,
)
from foodshare.core.policy import SELF_REGISTRATION_ROLES
from foodshare.core.security import hash_password, verify_password
from foodshare.models.account import Account, RegisterIn, SessionUser, ROLE_ATTRIBUTES, normalize_email


class SessionManager:
    """
    Owns the single current actor of this process.

    login/register wait `latency` seconds before answering to stand in for the
    identity service round trip. Two overlapping calls are not serialized:
    whichever finishes last owns the session.
    """

    def __init__(self, identity_store, session_store, session_key: str = "foodshare_user", latency: float = 0.5):
        self.identity_store = identity_store
        self.session_store = session_store
        self.session_key = session_key
        self.latency = latency
        self._session: Optional[SessionUser] = None

    async def _round_trip(self):
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def _establish(self, account: Account) -> SessionUser:
        session = account.public()
        self._session = session
        await self.session_store.set(self.session_key, session.model_dump_json().encode())
        return session

    async def login(self, email: str, password: str) -> SessionUser:
        await self._round_trip()

        account = await self.identity_store.find_by_email(email)
        if account is None:
            raise AccountNotFound()
        if not verify_password(password, account.password_hash):
            raise InvalidCredential()
        return await self._establish(account)

    async def register(self, candidate: RegisterIn) -> SessionUser:
        await self._round_trip()

        # admin is refused before any other field is looked at
        if candidate.role == "admin":
            raise AdminRegistrationForbidden()
        email = normalize_email(candidate.email)
        if not email or not candidate.password or not candidate.role:
            raise MissingRequiredField()
        if candidate.role not in SELF_REGISTRATION_ROLES:
            raise MissingRequiredField(f"Unknown role: {candidate.role}")
        if await self.identity_store.exists(email):
            raise DuplicateAccount()

        # only the attributes of the chosen role are carried over
        role_attrs = {name: getattr(candidate, name) for name in ROLE_ATTRIBUTES[candidate.role]}
        try:
            account = Account(
                id=self.identity_store.new_id(),
                email=email,
                password_hash=hash_password(candidate.password),
                full_name=candidate.full_name or "",
                phone=candidate.phone or "",
                location=candidate.location or "",
                role=candidate.role,
                **role_attrs,
            )
        except ValidationError as ex:
            raise MissingRequiredField(f"Invalid registration: {ex.errors()[0]['msg']}")

        account = await self.identity_store.insert(account)
        return await self._establish(account)

    async def logout(self):
        self._session = None
        await self.session_store.delete(self.session_key)

    async def restore(self) -> Optional[SessionUser]:
        """Pick up the session persisted by a previous run, if it is still readable."""
        raw = await self.session_store.get(self.session_key)
        if raw is None:
            return None
        try:
            self._session = SessionUser.model_validate_json(raw)
        except ValidationError:
            await self.session_store.delete(self.session_key)
            self._session = None
        return self._session

    def current_session(self) -> Optional[SessionUser]:
        return self._session

    def is_authenticated(self) -> bool:
        return self._session is not None
