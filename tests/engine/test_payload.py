"""Tests for payload construction."""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from hydrator import Resource, dehydrate, hydrate, payload, resource


@resource
@dataclass
class Entry(Resource):
    v: int = 0
    enabled: int | None = None

    @classmethod
    def __checkbox_properties__(cls) -> list[str]:
        return ["enabled"]


@resource
@dataclass
class Ledger(Resource):
    entries_list: list[Entry] = field(default_factory=list)
    items: list[Entry] = field(default_factory=list)
    head: Entry | None = None
    title: str = ""

    @classmethod
    def __resource_properties__(cls) -> dict[str, Any]:
        return {"head": Entry}

    @classmethod
    def __resource_collections__(cls) -> dict[str, Any]:
        return {"items": Entry, "entries_list": Entry}

    @classmethod
    def __service_info__(cls) -> dict[str, str]:
        return {"items": "svcA"}


@resource
@dataclass
class Form(Resource):
    ref: str = ""
    agreed: Any = None
    born: Any = None
    lines: list[Entry] = field(default_factory=list)
    comment: str = "not emitted"

    @classmethod
    def __primary_key__(cls) -> str:
        return "ref"

    @classmethod
    def __nested_data_key__(cls) -> str:
        return "data"

    @classmethod
    def __resource_collections__(cls) -> dict[str, Any]:
        return {"lines": Entry}

    @classmethod
    def __checkbox_properties__(cls) -> list[str]:
        return ["agreed"]

    @classmethod
    def __date_properties__(cls) -> list[str]:
        return ["born"]


@resource
@dataclass
class CapturingForm(Form):
    seen: ClassVar[list[dict[str, Any]]] = []

    def before_payload(self) -> None:
        self.seen.append({"agreed": self.agreed, "born": self.born})


@resource
@dataclass
class Stamped(Resource):
    name: str = ""
    stamped: bool = False

    def before_payload(self) -> None:
        self.stamped = True


def test_checkbox_becomes_boolean():
    entry = hydrate(Entry(), {"v": 1, "enabled": "1"})
    assert entry.enabled == 1

    assert payload(entry) == {"v": 1, "enabled": True}


def test_null_checkbox_left_alone():
    assert payload(hydrate(Entry(), {"v": 1})) == {"v": 1, "enabled": None}


def test_service_info_collection_rewrapped():
    ledger = hydrate(Ledger(), {"items": {"entries": [{"v": 1}, {"v": 2}], "total": 2}})

    built = payload(ledger)

    assert built["items"] == {
        "total": 2,
        "entries": [{"v": 1, "enabled": None}, {"v": 2, "enabled": None}],
    }


def test_plain_collection_and_property_built():
    ledger = hydrate(
        Ledger(),
        {"entries_list": [{"v": 3, "enabled": 0}], "head": {"v": 9}, "title": "t"},
    )

    built = payload(ledger)

    assert built["entries_list"] == [{"v": 3, "enabled": False}]
    assert built["head"] == {"v": 9, "enabled": None}
    assert built["title"] == "t"
    assert built["items"] == {"entries": []}
    assert built["service_info"] == {}


def test_payload_leaves_original_untouched():
    ledger = hydrate(Ledger(), {"items": {"entries": [{"v": 1, "enabled": 1}]}})
    before = dehydrate(ledger)

    payload(ledger)

    assert dehydrate(ledger) == before
    assert isinstance(ledger.items[0], Entry)
    assert ledger.items[0].enabled == 1


def test_collection_order_round_trips():
    data = {"entries_list": [{"v": 3}, {"v": 1}, {"v": 2}]}

    built = payload(hydrate(Ledger(), data))

    assert [entry["v"] for entry in built["entries_list"]] == [3, 1, 2]


def test_nested_data_emits_only_key_and_composites():
    form = hydrate(
        Form(),
        {"ref": "f1", "agreed": "yes", "born": "2001-02-03", "lines": [{"v": 1}]},
    )

    built = payload(form)

    assert built == {"ref": "f1", "data": {"lines": [{"v": 1, "enabled": None}]}}


def test_checkbox_and_date_effects_applied_on_clone():
    """Effects run even for fields the nested-data shape does not emit."""
    form = hydrate(CapturingForm(), {"ref": "f1", "agreed": "yes", "born": "2001-02-03"})
    CapturingForm.seen.clear()

    payload(form)

    assert form.agreed == 1
    assert form.born == "02/03/2001"
    assert CapturingForm.seen == [{"agreed": True, "born": "2001-02-03"}]


def test_before_payload_runs_on_clone():
    stamped = Stamped(name="n")

    assert payload(stamped) == {"name": "n", "stamped": True}
    assert stamped.stamped is False


def test_to_payload_matches_payload():
    entry = hydrate(Entry(), {"v": 4})

    assert entry.to_payload() == payload(entry)
