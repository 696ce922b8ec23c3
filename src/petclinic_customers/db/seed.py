"""
petclinic_customers.db.seed

Bundled seed script loading and execution.

Responsibilities:
- Load `seed_data.sql` from package resources.
- Split the script into individual statements.
- Execute it on a raw engine connection, in a single transaction.
"""

from __future__ import annotations

from importlib import resources

from sqlalchemy.ext.asyncio import AsyncEngine

from petclinic_customers.db import models  # noqa: F401  # registers tables on Base.metadata
from petclinic_customers.db.base import Base

SEED_RESOURCE = "seed_data.sql"


def load_seed_script(name: str = SEED_RESOURCE) -> str:
    return resources.files("petclinic_customers.db").joinpath(name).read_text(encoding="utf-8")


def split_statements(script: str) -> list[str]:
    """
    Split a SQL script on `;`, dropping `--` comments and blank statements.

    Semicolons and `--` inside single-quoted literals are kept as text.
    """

    statements: list[str] = []
    current: list[str] = []
    in_quote = False
    i = 0
    while i < len(script):
        ch = script[i]
        if in_quote:
            current.append(ch)
            if ch == "'":
                # '' is an escaped quote inside a literal
                if script[i + 1 : i + 2] == "'":
                    current.append("'")
                    i += 1
                else:
                    in_quote = False
        elif ch == "'":
            in_quote = True
            current.append(ch)
        elif script.startswith("--", i):
            newline = script.find("\n", i)
            i = len(script) if newline == -1 else newline
            continue
        elif ch == ";":
            statements.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    statements.append("".join(current))
    return [s.strip() for s in statements if s.strip()]


async def run_seed_script(engine: AsyncEngine, script: str) -> int:
    """
    Execute every statement of `script`; any failure rolls the whole script back.

    Tables are created first so the script also works on an empty database.
    Returns the number of statements executed.
    """

    statements = split_statements(script)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        for statement in statements:
            await conn.exec_driver_sql(statement)
    return len(statements)
