"""Tests for deep clone."""

from dataclasses import dataclass, field
from typing import Any, Self

from hydrator import Resource, clone, hydrate, resource


@resource
@dataclass
class Note(Resource):
    text: str = ""
    meta: dict[str, Any] = field(default_factory=dict)


@resource
@dataclass
class Notebook(Resource):
    title: str = ""
    cover: Note | None = None
    notes: list[Note] = field(default_factory=list)
    labels: list[Any] = field(default_factory=list)

    @classmethod
    def __resource_properties__(cls) -> dict[str, Any]:
        return {"cover": Note}

    @classmethod
    def __resource_collections__(cls) -> dict[str, Any]:
        return {"notes": Note}


@resource
@dataclass
class Counted(Resource):
    value: int = 0
    copies: int = 0

    def __clone__(self) -> Self:
        return Counted(value=self.value, copies=self.copies + 1)


def _notebook() -> Notebook:
    return hydrate(
        Notebook(),
        {
            "title": "t",
            "cover": {"text": "front"},
            "notes": [{"text": "a", "meta": {"tags": ["x"]}}, {"text": "b"}],
            "labels": [["nested"], {"k": "v"}, "plain"],
        },
    )


def test_clone_is_equal_but_independent():
    original = _notebook()

    copied = clone(original)

    assert copied == original
    assert copied is not original
    assert copied.cover is not original.cover
    assert copied.notes is not original.notes


def test_mutating_clone_collection_element_leaves_original():
    original = _notebook()

    copied = clone(original)
    copied.notes[0].text = "changed"
    copied.notes[0].meta["tags"].append("y")
    copied.notes.append(Note(text="c"))

    assert original.notes[0].text == "a"
    assert original.notes[0].meta == {"tags": ["x"]}
    assert len(original.notes) == 2


def test_mutating_clone_plain_composites_leaves_original():
    original = _notebook()

    copied = clone(original)
    copied.labels[0].append("more")
    copied.labels[1]["k"] = "w"
    copied.cover.text = "back"  # type: ignore[union-attr]

    assert original.labels == [["nested"], {"k": "v"}, "plain"]
    assert original.cover.text == "front"  # type: ignore[union-attr]


def test_clone_copies_extra_attributes():
    original = _notebook()
    original.extra = {"a": [1]}  # type: ignore[attr-defined]

    copied = clone(original)
    copied.extra["a"].append(2)  # type: ignore[attr-defined]

    assert original.extra == {"a": [1]}  # type: ignore[attr-defined]


def test_cloneable_override_used():
    copied = clone(Counted(value=5))

    assert copied == Counted(value=5, copies=1)


def test_resource_clone_method():
    original = _notebook()

    assert original.clone() == original
