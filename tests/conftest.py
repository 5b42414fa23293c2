from typing import Any

import pytest

from schemas import ForeignPrice, Positive, price_dispatch
from structval import Enum, List, Maybe, Str, Struct, Union


@pytest.fixture(scope="function")
def person() -> Struct:
    return Struct(
        {
            "name": Str,
            "age": Maybe(Positive),
            "tags": List(Str),
            "status": Enum(("active", "inactive"), "Status"),
        },
        "Person",
    )


@pytest.fixture(scope="function")
def price() -> Union:
    return Union((Positive, ForeignPrice), price_dispatch, "Price")


@pytest.fixture(scope="function")
def valid_person() -> dict[str, Any]:
    return {"name": "Ada", "age": 36, "tags": ["math"], "status": "active"}
