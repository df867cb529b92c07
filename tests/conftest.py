import os
from typing import Any, Optional

import httpx
import pytest
from pydantic import TypeAdapter

from structbind import Binder, BinderConfig, StrategyError


@pytest.fixture(scope="session", autouse=True)
def _force_test_env():
    # Make binder config deterministic in tests
    for key in ("STRUCTBIND_TAG", "STRUCTBIND_STRICT", "STRUCTBIND_CASE_INSENSITIVE"):
        os.environ.pop(key, None)


def query_strategy(name: str, field_type: Any, req: httpx.Request) -> Optional[str]:
    return req.url.params.get(name)


def header_strategy(name: str, field_type: Any, req: httpx.Request) -> Optional[str]:
    return req.headers.get(name) or None


def body_strategy(hint: str, field_type: Any, req: httpx.Request) -> Any:
    if not req.content:
        return None
    try:
        return TypeAdapter(field_type).validate_json(req.content)
    except ValueError as e:
        raise StrategyError(f"malformed body: {e}") from e


def make_http_binder(config: Optional[BinderConfig] = None) -> Binder:
    return (
        Binder(config=config or BinderConfig())
        .register("query", query_strategy)
        .register("header", header_strategy)
        .register("body", body_strategy)
    )


@pytest.fixture()
def http_binder():
    return make_http_binder()


@pytest.fixture()
def binder_factory():
    return make_http_binder
