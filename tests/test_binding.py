from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import pytest

from bootconf.core.binding import bind, json_type, unbind
from bootconf.core.errors import BindError


class Mode(Enum):
    FAST = "fast"
    SAFE = "safe"


@dataclass
class Database:
    url: str = "sqlite://"
    pool: int = 5


@dataclass
class Required:
    name: str


@dataclass
class Service:
    Port: int = 0
    Host: str = "localhost"
    ratio: float = 1.0
    enabled: bool = False
    tags: list[str] = field(default_factory=list)
    limits: dict[str, int] = field(default_factory=dict)
    bounds: tuple[int, int] = (0, 0)
    mode: Mode = Mode.SAFE
    timeout: Optional[int] = 30
    db: Database = field(default_factory=Database)
    replica: Database | None = None
    listen_port: int = field(default=0, metadata={"json": "listen-port"})
    secret: str = field(default="keep", metadata={"json": "-"})
    _cache: str = "private"
    extra: Any = None


@dataclass(frozen=True)
class Frozen:
    value: int = 0


def test_matching_fields_are_set_and_absent_fields_keep_defaults():
    svc = Service()
    bind(svc, {"Port": 8080})
    assert svc.Port == 8080
    assert svc.Host == "localhost"
    assert svc.db == Database()


def test_keys_match_case_insensitively_and_unknown_keys_are_ignored():
    svc = Service()
    bind(svc, {"port": 9000, "HOST": "example.org", "nope": True})
    assert svc.Port == 9000
    assert svc.Host == "example.org"
    assert not hasattr(svc, "nope")


def test_exact_name_wins_over_case_insensitive_match():
    @dataclass
    class Twins:
        port: int = 0
        Port: int = 0

    twins = Twins()
    bind(twins, {"Port": 1})
    assert twins == Twins(port=0, Port=1)


def test_json_metadata_renames_and_hides_fields():
    svc = Service()
    bind(svc, {"listen-port": 7, "listen_port": 8, "secret": "leaked", "-": "x"})
    assert svc.listen_port == 7
    assert svc.secret == "keep"


def test_private_fields_are_never_bound():
    svc = Service()
    bind(svc, {"_cache": "overwritten"})
    assert svc._cache == "private"


def test_nested_dataclass_is_populated_in_place():
    svc = Service()
    db = svc.db
    bind(svc, {"db": {"pool": 20}})
    assert svc.db is db
    assert db == Database(url="sqlite://", pool=20)


def test_nested_dataclass_is_built_from_defaults_when_unset():
    svc = Service()
    bind(svc, {"replica": {"url": "postgres://replica"}})
    assert svc.replica == Database(url="postgres://replica", pool=5)


def test_nested_dataclass_without_defaults_fails():
    @dataclass
    class Holder:
        inner: Optional[Required] = None

    with pytest.raises(BindError):
        bind(Holder(), {"inner": {"name": "x"}})


def test_null_clears_optional_fields_and_leaves_others_alone():
    svc = Service(Port=1, timeout=5, replica=Database())
    bind(svc, {"Port": None, "timeout": None, "replica": None})
    assert svc.Port == 1
    assert svc.timeout is None
    assert svc.replica is None


def test_collections_and_scalars_are_converted():
    svc = Service()
    bind(
        svc,
        {
            "ratio": 2,
            "enabled": True,
            "tags": ["a", "b"],
            "limits": {"cpu": 2},
            "bounds": [1, 9],
            "mode": "fast",
            "extra": {"anything": [1, None]},
        },
    )
    assert svc.ratio == 2.0
    assert isinstance(svc.ratio, float)
    assert svc.enabled is True
    assert svc.tags == ["a", "b"]
    assert svc.limits == {"cpu": 2}
    assert svc.bounds == (1, 9)
    assert svc.mode is Mode.FAST
    assert svc.extra == {"anything": [1, None]}


@pytest.mark.parametrize(
    "data, field_path",
    [
        ({"Port": "8080"}, "Port"),
        ({"Port": 80.5}, "Port"),
        ({"Port": True}, "Port"),
        ({"enabled": 1}, "enabled"),
        ({"tags": ["a", 2]}, "tags[1]"),
        ({"limits": {"cpu": "two"}}, "limits.cpu"),
        ({"bounds": [1, 2, 3]}, "bounds"),
        ({"mode": "reckless"}, "mode"),
        ({"db": {"pool": "big"}}, "db.pool"),
        ({"db": []}, "db"),
    ],
)
def test_type_mismatch_names_the_field(data, field_path):
    with pytest.raises(BindError) as excinfo:
        bind(Service(), data)
    assert excinfo.value.field_path == field_path


def test_top_level_must_be_an_object():
    with pytest.raises(BindError) as excinfo:
        bind(Service(), [1, 2])
    assert excinfo.value.got == "array"
    assert "<root>" in str(excinfo.value)


def test_mapping_destination_is_updated():
    dest = {"keep": 1, "replace": 1}
    bind(dest, {"replace": 2, "new": 3})
    assert dest == {"keep": 1, "replace": 2, "new": 3}


def test_unsupported_and_frozen_destinations_are_rejected():
    with pytest.raises(TypeError):
        bind(object(), {})
    with pytest.raises(TypeError):
        bind(Frozen(), {"value": 1})


def test_unbind_uses_json_names_and_skips_hidden_fields():
    data = unbind(Service(listen_port=3, mode=Mode.FAST, bounds=(1, 2)))
    assert data["listen-port"] == 3
    assert "listen_port" not in data
    assert "secret" not in data
    assert "_cache" not in data
    assert data["mode"] == "fast"
    assert data["bounds"] == [1, 2]
    assert data["db"] == {"url": "sqlite://", "pool": 5}


def test_unbind_then_bind_restores_equal_value():
    original = Service(
        Port=8080,
        Host="example.org",
        ratio=0.25,
        enabled=True,
        tags=["x"],
        limits={"mem": 512},
        bounds=(3, 4),
        mode=Mode.FAST,
        timeout=None,
        db=Database(url="postgres://", pool=9),
        replica=Database(pool=1),
        listen_port=81,
        extra=[1, "two"],
    )
    restored = Service()
    bind(restored, unbind(original))
    assert restored == original


@pytest.mark.parametrize(
    "value, expected",
    [(None, "null"), (True, "boolean"), (1, "number"), (1.5, "number"), ("s", "string"), ([], "array"), ({}, "object")],
)
def test_json_type(value, expected):
    assert json_type(value) == expected
