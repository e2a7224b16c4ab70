"""
Create an account (e.g. the first operator). Run from project root:
  python -m auth_service.scripts.create_account USER_NAME PASSWORD [--created-by ACTOR]
Example:
  python -m auth_service.scripts.create_account operator1 Secr3t! --created-by bootstrap
"""
import argparse
import logging
import sys

import pydantic

from auth_service.core.config import get_settings
from auth_service.core.database import SessionLocal
from auth_service.core.errors import AuthServiceError
from auth_service.core.security import get_credential_hasher, get_token_issuer
from auth_service.mapping import PayloadMapper
from auth_service.schemas import AccountCreate
from auth_service.services.account import AccountService
from auth_service.unit_of_work import UnitOfWork

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an auth-service account (no registration UI).")
    parser.add_argument("user_name", help="User name (6-50 chars, no spaces)")
    parser.add_argument("password", help="Password (6-50 chars, no spaces)")
    parser.add_argument("--created-by", default=None, help="Actor recorded on the row (default: DEFAULT_ACTOR)")
    args = parser.parse_args(argv)

    created_by = args.created_by or get_settings().DEFAULT_ACTOR
    try:
        payload = AccountCreate(user_name=args.user_name, password=args.password, created_by=created_by)
    except pydantic.ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"Invalid {field}: {error['msg']}", file=sys.stderr)
        return 1

    with UnitOfWork(SessionLocal) as uow:
        service = AccountService(uow, get_credential_hasher(), get_token_issuer())
        try:
            account = service.add_account(PayloadMapper().to_account(payload), payload.created_by)
        except AuthServiceError as e:
            print(e.message, file=sys.stderr)
            return 2 if e.status_code >= 500 else 1
    print(f"Created account '{account.user_name}' (id={account.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
