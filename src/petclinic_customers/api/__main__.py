"""
petclinic_customers.api.__main__

Entrypoint for running the service via `python -m petclinic_customers.api`.

Responsibilities:
- Load settings.
- Resolve database credentials from Secrets Manager when enabled.
- Create the app and start uvicorn.
"""

from __future__ import annotations

import os

import uvicorn

from petclinic_customers.api.app import create_app
from petclinic_customers.credentials import create_secrets_client, resolve_connection_parameters
from petclinic_customers.observability.logging import configure_logging
from petclinic_customers.settings import get_settings


def main() -> None:
    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    database_url = None
    if settings.use_secrets_manager:
        # ConfigurationError propagates: no credentials, no process.
        params = resolve_connection_parameters(
            os.environ, client=create_secrets_client(settings)
        )
        database_url = params.url

    app = create_app(settings=settings, database_url=database_url)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
