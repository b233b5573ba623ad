# casheer

Building blocks for a personal budget planner that tracks monthly planning
entries, the expenses booked against them, and debts.

The package has these parts:

- `casheer.models` holds the dataclasses `Value`, `BaseModel`, `Debt`,
  `Entry` and `Expense`. It also holds the `ExpenseInvalidEntryKeyError`
  exception. Calling `validate()` on a debt, entry or expense checks the
  whole record. It raises one `InvalidModelError` that lists every problem
  it found.
- `casheer.validation` holds the validation tools: `InvalidModelError`,
  `InvalidModelErrorBuilder`, the `ModelValidator` protocol and
  `validate_model`.
- `casheer.errors` holds `NotFoundError`, a `LookupError` for records that
  do not exist. It can carry the original exception.
- `casheer.api_common`, `casheer.api_debts`, `casheer.api_entries` and
  `casheer.api_expenses` hold the request and response payloads in JSON:API
  style. Every payload dataclass has four methods: `to_dict`, `from_dict`,
  `to_json` and `from_json`. `ApiError` and `ErrorResponse` are exceptions,
  so a server error body can be raised and caught like any other error.
- `casheer.store` holds helpers for SQLite databases, built on the standard
  `sqlite3` module.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Validating models

```python
from casheer.models import Entry
from casheer.validation import InvalidModelError

entry = Entry(month=13, year=2019, category="food", subcategory="")
try:
    entry.validate()
except InvalidModelError as err:
    print(err)
    # invalid entry: month must be between 1 and 12; year must be at least 2020; subcategory cannot be empty
    print(err.reasons)
```

Each model has its own rules:

- A `Debt` needs a `person`.
- An `Expense` needs a `name`.
- An `Entry` needs a month from 1 to 12, a year of 2020 or later, a
  category and a subcategory.

`validate_model(model)` runs `model.validate()` and gives the model back if
it passed.

To collect your own reasons, use a builder:

```python
from casheer.validation import InvalidModelErrorBuilder

builder = InvalidModelErrorBuilder("debt")
builder.add_error("person cannot be empty")
builder.error()             # InvalidModelError, or None if no reason was added
builder.raise_if_invalid()  # raises: invalid debt: person cannot be empty
```

## API messages

```python
from casheer.api_common import ErrorResponse
from casheer.api_debts import CreateDebtResponse

text = """{"data": {"id": "1", "type": "debt",
  "attributes": {"person": "Andrei", "details": "pay me back",
                 "value": {"amount": 100, "currency": "EUR", "exponent": -2}},
  "links": {"self": "http://localhost/debts/1"}},
 "links": {"home": "http://localhost"}}"""

response = CreateDebtResponse.from_json(text)
print(response.data.attributes.person, response.data.attributes.value.amount)
print(response.data.links.self_link)  # the JSON key "self"

error = ErrorResponse.from_dict(
    {"error": {"status": 404, "title": "Not Found", "detail": "debt not found"}}
)
print(error)      # {error:{"Status":404,"Title":"Not Found","Detail":"debt not found"}}
print(error.err.status)
```

When a payload is serialized:

- Optional fields are left out when they are `None`.
- A JSON key named `self` is the `self_link` attribute in Python.
- Timestamps (`created_at`, `updated_at`) are written in RFC 3339 form, for
  example `2024-01-01T00:00:00Z`.
- `from_dict` and `from_json` raise `ValueError` when a field has the wrong
  JSON type.

The resource type names are in these constants:

- `DEBT_TYPE` in `casheer.api_debts`
- `ENTRY_TYPE` in `casheer.api_entries`
- `EXPENSE_TYPE` in `casheer.api_expenses`
- `TOTAL_TYPE` in `casheer.api_common`

## Storage helpers

```python
from casheer.store import connect_sqlite, ensure_database_file_is_initialized

conn = connect_sqlite("casheer.db")
ensure_database_file_is_initialized(conn, "casheer.db", "migrations/")
```

`run_migrations(conn, migration_dir)` runs every file in the directory and
its subdirectories. The files run in sorted path order. Files ending in
`.down.sql` are skipped.

`ensure_database_file_is_initialized` only runs the migrations when the
database file is missing or empty. If they fail, it removes the file again.

`delete_all_data(conn)` empties the `debts`, `expenses` and `entries` tables.

`require_entry(conn, entry_id)` raises `ExpenseInvalidEntryKeyError` unless
the `entries` table has a row with that id that has not been soft-deleted.

`temporary_database(migrations_dir)` is a context manager for tests. It
creates a `.testdb` file in the current directory and runs the migrations on
it. It then yields `(connection, path)`, and removes the file on exit.

Setup and migration failures raise `MigrationError`.

## What the package does not do

- It does not provide an HTTP server, an HTTP client or a command-line
  program. The API types describe the messages only.
- It ships no SQL migration scripts. The table layout comes from the scripts
  you point `run_migrations` at.
- It has no functions that create, read, update or list debts, entries or
  expenses in the database.