"""Account repository: user-name lookups and in-place credential/user-name mutation."""

from collections.abc import Iterable

from starlette.concurrency import run_in_threadpool

from auth_service.models import Account
from auth_service.repositories.base import AuditedRepository


class AccountRepository(AuditedRepository[Account]):
    model = Account
    updatable_fields = ("user_name", "password", "is_active")

    def get_by_user_name(self, user_name: str) -> Account | None:
        """Exact match among accounts that are not soft-deleted."""
        return self._live().filter(Account.user_name == user_name).first()

    async def get_by_user_name_async(self, user_name: str) -> Account | None:
        return await run_in_threadpool(self.get_by_user_name, user_name)

    def get_by_user_names(self, user_names: Iterable[str]) -> list[Account]:
        names = list(user_names)
        if not names:
            return []
        return self._live().filter(Account.user_name.in_(names)).order_by(Account.id).all()

    def update_password(self, user_name: str, password_hash: str, actor: str) -> Account | None:
        """Replace the stored hash; returns None (and changes nothing) for an unknown user name."""
        account = self.get_by_user_name(user_name)
        if account is None:
            return None
        account.password = password_hash
        self._stamp_update(account, actor)
        self.session.flush()
        return account

    def update_user_name(self, old_user_name: str, new_user_name: str, actor: str) -> Account | None:
        account = self.get_by_user_name(old_user_name)
        if account is None:
            return None
        account.user_name = new_user_name
        self._stamp_update(account, actor)
        self.session.flush()
        return account

    def delete_by_user_name(self, user_name: str, actor: str) -> Account | None:
        account = self.get_by_user_name(user_name)
        if account is None:
            return None
        self.remove(account, actor)
        return account

    def delete_by_user_names(self, user_names: Iterable[str], actor: str) -> int:
        """Soft delete every live account in user_names; returns how many accounts were removed."""
        accounts = self.get_by_user_names(user_names)
        if accounts:
            self.remove_range(accounts, actor)
        return len(accounts)
