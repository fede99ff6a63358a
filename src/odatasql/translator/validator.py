"""Post-assembly query validation using sqlglot."""

from __future__ import annotations

import logging

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

logger = logging.getLogger("odatasql.translator")

# DocumentDB SQL uses SELECT TOP n like T-SQL, the closest sqlglot dialect.
SQLGLOT_DIALECT = "tsql"

# OData lambda operators survive translation and are not SQL.
LAMBDA_MARKERS = ("/any(", "/all(")


def validate_sql(sql: str, root_alias: str = "c") -> list[str]:
    """Parse an assembled DocumentDB query or clause fragment with sqlglot.

    Fragments without a SELECT (``WHERE ...``, ``ORDER BY ...``) are checked
    as if they followed ``SELECT * FROM <root_alias>``. Queries containing
    lambda operators are skipped. Returns error messages, empty if valid;
    callers treat them as warnings.
    """
    if any(marker in sql for marker in LAMBDA_MARKERS):
        logger.debug("Skipping validation of lambda query: %s", sql)
        return []

    statement = sql
    if not sql.lstrip().upper().startswith("SELECT"):
        statement = f"SELECT * FROM {root_alias} {sql}"

    try:
        parsed = sqlglot.parse_one(statement, read=SQLGLOT_DIALECT)
    except SqlglotError as exc:
        return [str(exc)]
    if not isinstance(parsed, exp.Select):
        return [f"Expected a SELECT query, parsed {parsed.key.upper()}"]
    return []
