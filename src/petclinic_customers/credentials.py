"""
petclinic_customers.credentials

Database credential resolution from AWS Secrets Manager.

Responsibilities:
- Derive the secret id from the `SECRETS_NAME` environment token.
- Fetch and parse the JSON credential blob (`host`, `username`, `password`).
- Compose the MySQL connection URL consumed by `db.session.create_engine`.

Resolution runs once, before the app is built. Every failure is a
`ConfigurationError`; the process must not start without credentials.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy.engine import URL

from petclinic_customers.db.session import CREATE_DATABASE_DIRECTIVE
from petclinic_customers.observability.logging import get_logger
from petclinic_customers.settings import Settings

SECRETS_NAME_ENV = "SECRETS_NAME"
SECRET_ID_DELIMITER = "-"
REQUIRED_SECRET_KEYS = ("host", "username", "password")

DRIVER_NAME = "mysql+aiomysql"
DATABASE_PORT = 3306
DATABASE_NAME = "petclinic"

log = get_logger(__name__)


class ConfigurationError(RuntimeError):
    """Database credentials could not be obtained; startup must abort."""


class SecretsClient(Protocol):
    def get_secret_value(self, *, SecretId: str) -> dict[str, Any]: ...


@dataclass(frozen=True, slots=True)
class ConnectionParameters:
    host: str
    username: str
    password: str = field(repr=False)

    @property
    def url(self) -> URL:
        # str(URL) masks the password, so the URL itself is safe to log.
        return URL.create(
            drivername=DRIVER_NAME,
            username=self.username,
            password=self.password,
            host=self.host,
            port=DATABASE_PORT,
            database=DATABASE_NAME,
            query={CREATE_DATABASE_DIRECTIVE: "true"},
        )


def derive_secret_id(token: str) -> str:
    """
    `petclinic-prod-mysql` -> `petclinic-prod`.

    Tokens without two leading non-empty segments are rejected outright.
    """

    parts = token.split(SECRET_ID_DELIMITER)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ConfigurationError(
            f"{SECRETS_NAME_ENV}={token!r} must contain at least two "
            f"'{SECRET_ID_DELIMITER}'-delimited segments"
        )
    return SECRET_ID_DELIMITER.join(parts[:2])


def parse_secret_string(secret_string: str) -> ConnectionParameters:
    try:
        payload = json.loads(secret_string)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"secret payload is not valid JSON: {e.msg}") from e
    if not isinstance(payload, dict):
        raise ConfigurationError("secret payload must be a JSON object")

    missing = [key for key in REQUIRED_SECRET_KEYS if payload.get(key) in (None, "")]
    if missing:
        raise ConfigurationError(f"secret payload is missing {', '.join(missing)}")

    return ConnectionParameters(
        host=str(payload["host"]),
        username=str(payload["username"]),
        password=str(payload["password"]),
    )


def fetch_secret_string(client: SecretsClient, secret_id: str) -> str:
    try:
        response = client.get_secret_value(SecretId=secret_id)
    except (ClientError, BotoCoreError) as e:
        raise ConfigurationError(f"unable to read secret {secret_id!r}: {e}") from e

    secret_string = response.get("SecretString")
    if secret_string is None:
        raise ConfigurationError(f"secret {secret_id!r} has no SecretString")
    return secret_string


def resolve_connection_parameters(
    environ: Mapping[str, str], *, client: SecretsClient
) -> ConnectionParameters:
    token = (environ.get(SECRETS_NAME_ENV) or "").strip()
    if not token:
        raise ConfigurationError(f"environment variable {SECRETS_NAME_ENV} is not set")

    secret_id = derive_secret_id(token)
    params = parse_secret_string(fetch_secret_string(client, secret_id))
    log.info("database_credentials_resolved", secret_id=secret_id, host=params.host)
    return params


def create_secrets_client(settings: Settings) -> SecretsClient:
    try:
        return boto3.client("secretsmanager", region_name=settings.aws_region)
    except BotoCoreError as e:
        raise ConfigurationError(f"unable to create Secrets Manager client: {e}") from e


# --- Module Notes -----------------------------------------------------------
# No retries and no fallback to `Settings.database_url`: a missing or broken
# secret is an operator error that should stop the rollout.
