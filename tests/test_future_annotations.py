from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

import pytest

from structbind import Bind, Binder, BinderConfig


@dataclass
class Paging:
    size: Annotated[int, Bind("src=size")] = 20


@dataclass
class Listing:
    paging: Paging = field(default_factory=Paging)
    n: Annotated[int, Bind("src=n")] = 0


def _binder():
    return Binder(config=BinderConfig()).register("src", lambda hint, _t, src: src.get(hint))


def test_string_annotations_resolve_markers_and_nesting():
    result = Listing()
    _binder().bind({"n": "3", "size": "5"}, result)

    assert (result.n, result.paging.size) == (3, 5)


def test_unresolvable_annotation_names_the_field():
    @dataclass
    class LocalPaging:
        size: int = 20

    @dataclass
    class LocalListing:
        paging: LocalPaging = field(default_factory=LocalPaging)
        n: Annotated[int, Bind("src=n")] = 0

    with pytest.raises(TypeError) as exc:
        _binder().bind({"n": "3"}, LocalListing())

    assert "paging" in str(exc.value)
    assert isinstance(exc.value.__cause__, NameError)
