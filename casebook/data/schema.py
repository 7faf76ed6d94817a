"""
Summaries of the sample schema script and the documented engine syntax variants.

The schema is never executed here; `summarize_schema` only scans the DDL/DML
text for table definitions and seed row counts so the page can describe it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

_CREATE_RE = re.compile(r"CREATE\s+TABLE\s+(\w+)\s*\((.*?)\n\s*\);", re.IGNORECASE | re.DOTALL)
_INSERT_RE = re.compile(r"INSERT\s+INTO\s+(\w+)\s+VALUES(.*?);\s*$", re.IGNORECASE | re.DOTALL | re.MULTILINE)
_COLUMN_RE = re.compile(r"^(\w+)\s+([A-Za-z]+(?:\s*\(\s*\d+(?:\s*,\s*\d+)?\s*\))?)(.*)$")
_FK_RE = re.compile(
    r"FOREIGN\s+KEY\s*\((\w+)\)\s*REFERENCES\s+(\w+)\s*\((\w+)\)",
    re.IGNORECASE,
)
_ROW_RE = re.compile(r"^\s*\(", re.MULTILINE)


@dataclass(frozen=True)
class ColumnSummary:
    name: str
    data_type: str
    nullable: bool
    primary_key: bool
    comment: Optional[str] = None


@dataclass
class TableSummary:
    name: str
    columns: List[ColumnSummary] = field(default_factory=list)
    foreign_keys: List[Tuple[str, str, str]] = field(default_factory=list)
    seed_rows: int = 0


def _split_comment(line: str) -> Tuple[str, Optional[str]]:
    code, sep, comment = line.partition("--")
    return code.strip().rstrip(","), (comment.strip() or None) if sep else None


def _parse_table_body(name: str, body: str) -> TableSummary:
    table = TableSummary(name=name)
    for raw in body.splitlines():
        code, comment = _split_comment(raw)
        if not code:
            continue
        fk = _FK_RE.search(code)
        if fk:
            table.foreign_keys.append((fk.group(1), fk.group(2), fk.group(3)))
            continue
        if code.upper().startswith(("PRIMARY KEY", "UNIQUE", "CHECK", "CONSTRAINT")):
            continue
        match = _COLUMN_RE.match(code)
        if not match:
            continue
        constraints = match.group(3).upper()
        primary_key = "PRIMARY KEY" in constraints
        table.columns.append(
            ColumnSummary(
                name=match.group(1),
                data_type=re.sub(r"\s+", "", match.group(2)).upper().replace(",", ", "),
                nullable=not primary_key and "NOT NULL" not in constraints,
                primary_key=primary_key,
                comment=comment,
            )
        )
    return table


def summarize_schema(sql_text: str) -> List[TableSummary]:
    """One summary per `CREATE TABLE`, in script order, with seed row counts."""
    tables: Dict[str, TableSummary] = {}
    for match in _CREATE_RE.finditer(sql_text):
        tables[match.group(1)] = _parse_table_body(match.group(1), match.group(2))
    for match in _INSERT_RE.finditer(sql_text):
        table = tables.get(match.group(1))
        if table is not None:
            table.seed_rows += len(_ROW_RE.findall(match.group(2)))
    return list(tables.values())


def read_schema(path: Path) -> str:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")
    return path.read_text(encoding="utf-8")


def tables_frame(tables: List[TableSummary]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "table": t.name,
                "columns": len(t.columns),
                "foreign_keys": ", ".join(f"{col} → {ref}.{ref_col}" for col, ref, ref_col in t.foreign_keys),
                "seed_rows": t.seed_rows,
            }
            for t in tables
        ],
        columns=["table", "columns", "foreign_keys", "seed_rows"],
    )


def schema_frame(tables: List[TableSummary]) -> pd.DataFrame:
    """One row per column across all tables."""
    return pd.DataFrame(
        [
            {
                "table": t.name,
                "column": c.name,
                "type": c.data_type,
                "nullable": c.nullable,
                "primary_key": c.primary_key,
                "comment": c.comment or "",
            }
            for t in tables
            for c in t.columns
        ],
        columns=["table", "column", "type", "nullable", "primary_key", "comment"],
    )


ENGINES = ("PostgreSQL", "SQLite", "DuckDB")

# Loader invocations; {db} and {schema} are substituted by load_commands()
LOAD_COMMANDS: Dict[str, str] = {
    "PostgreSQL": "psql -d {db} -f {schema}",
    "SQLite": "sqlite3 {db}.db < {schema}",
    "DuckDB": "duckdb {db}.duckdb < {schema}",
}

ENGINE_SYNTAX: List[Dict[str, str]] = [
    {
        "operation": "Truncate date to month",
        "PostgreSQL": "DATE_TRUNC('month', order_date)",
        "SQLite": "strftime('%Y-%m-01', order_date)",
        "DuckDB": "DATE_TRUNC('month', order_date)",
    },
    {
        "operation": "Format date as year-month",
        "PostgreSQL": "TO_CHAR(order_date, 'YYYY-MM')",
        "SQLite": "strftime('%Y-%m', order_date)",
        "DuckDB": "strftime(order_date, '%Y-%m')",
    },
    {
        "operation": "Difference in days",
        "PostgreSQL": "end_date - start_date",
        "SQLite": "julianday(end_date) - julianday(start_date)",
        "DuckDB": "DATE_DIFF('day', start_date, end_date)",
    },
    {
        "operation": "Add an interval",
        "PostgreSQL": "order_date + INTERVAL '30 days'",
        "SQLite": "date(order_date, '+30 days')",
        "DuckDB": "order_date + INTERVAL 30 DAY",
    },
    {
        "operation": "Current date",
        "PostgreSQL": "CURRENT_DATE",
        "SQLite": "date('now')",
        "DuckDB": "CURRENT_DATE",
    },
    {
        "operation": "Filtered aggregate",
        "PostgreSQL": "COUNT(*) FILTER (WHERE status = 'active')",
        "SQLite": "COUNT(*) FILTER (WHERE status = 'active')  -- 3.30+",
        "DuckDB": "COUNT(*) FILTER (WHERE status = 'active')",
    },
    {
        "operation": "String aggregation",
        "PostgreSQL": "STRING_AGG(name, ', ')",
        "SQLite": "GROUP_CONCAT(name, ', ')",
        "DuckDB": "STRING_AGG(name, ', ')",
    },
    {
        "operation": "Integer division to decimal",
        "PostgreSQL": "a::NUMERIC / b",
        "SQLite": "CAST(a AS REAL) / b",
        "DuckDB": "a::DOUBLE / b",
    },
    {
        "operation": "Recursive CTE",
        "PostgreSQL": "WITH RECURSIVE",
        "SQLite": "WITH RECURSIVE",
        "DuckDB": "WITH RECURSIVE",
    },
]


def engine_syntax_frame() -> pd.DataFrame:
    return pd.DataFrame(ENGINE_SYNTAX, columns=["operation", *ENGINES])


def load_commands(schema_file: str, db_name: str = "case_studies") -> Dict[str, str]:
    return {engine: cmd.format(db=db_name, schema=schema_file) for engine, cmd in LOAD_COMMANDS.items()}
