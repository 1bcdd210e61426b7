"""
Test data generators for JSON parsing benchmarks.

Creates JSON documents that stress each part of the decoder:
- Object-heavy records (key strings, colons, separators)
- Numeric rows that other decoders would turn into matrices
- Mixed arrays, deep nesting, and escape-heavy strings
"""

import json
import random
import string
from typing import Any

# Constants for random data generation
_SEED = 20140101
_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t", "\\u00e9"]

DATA_TYPES = (
    "small_object",
    "large_object",
    "numeric_rows",
    "mixed_array",
    "nested_structure",
    "string_heavy",
)


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "numeric_rows": _generate_numeric_rows,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(_SEED))


def _generate_small_object(rng: random.Random) -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "tags": ["admin", 7, None, False],
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object(rng: random.Random) -> str:
    """Generates a large JSON object (> 10KB) of nested records."""
    data = {
        "user_id": rng.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(rng, 10),
            "last_name": _random_string(rng, 12),
            "address": {
                "street": f"{rng.randint(1, 9999)} {_random_string(rng, 8)} St",
                "zip": f"{rng.randint(10000, 99999)}",
                "country": "US",
            },
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "status": rng.choice(["completed", "pending", "failed"]),
                "refunded": rng.choice([True, False, None]),
            }
            for i in range(60)
        ],
    }
    return json.dumps(data)


def _generate_numeric_rows(rng: random.Random) -> str:
    """Generates equal-length numeric rows, one list per row."""
    rows = [
        [round(rng.uniform(-1e3, 1e3), 4) for _ in range(20)]
        for _ in range(100)
    ]
    return json.dumps(rows)


def _generate_mixed_array(rng: random.Random) -> str:
    """Generates a large array with mixed data types."""
    choices = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: rng.uniform(-100.0, 100.0) * 10 ** rng.randint(-8, 8),
        lambda i: _random_string(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "score": round(rng.uniform(0, 100), 2)},
        lambda i: [i, str(i), [i]],
    ]
    array: list[Any] = [rng.choice(choices)(i) for i in range(300)]
    return json.dumps(array)


def _generate_nested_structure(rng: random.Random) -> str:
    """Generates a deeply nested JSON structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(rng, 10)}

        return {
            "level": depth,
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(7))


def _generate_string_heavy(rng: random.Random) -> str:
    """Generates JSON with many string escape sequences."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            else:
                chars.append(
                    rng.choice(string.ascii_letters + string.digits + " ")
                )
        return '"' + "".join(chars) + '"'

    strings = ", ".join(create_escaped_string() for _ in range(200))
    paths = ", ".join(
        f'"C:\\\\Users\\\\{_random_string(rng, 8)}\\\\file_{i}.txt"'
        for i in range(50)
    )
    return f'{{"strings": [{strings}], "paths": [{paths}]}}'


def _random_string(rng: random.Random, length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(rng.choices(string.ascii_letters, k=length))
