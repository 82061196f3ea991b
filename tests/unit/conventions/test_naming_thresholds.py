from __future__ import annotations

from repo_intel.conventions import detect_conventions
from repo_intel.index import FileRecord, IntelIndex


def _index(*exports_per_file: tuple[str, ...]) -> IntelIndex:
    index = IntelIndex()
    for position, exports in enumerate(exports_per_file):
        path = f"/repo/src/module{position}.ts"
        index.files[path] = FileRecord(path=path, exports=exports, imports=(), indexed="t")
    return index


def test_naming_omitted_below_sample_threshold() -> None:
    index = _index(("fooBar", "bazQux", "oneTwo", "threeFour"))

    conventions = detect_conventions(index)

    assert conventions.naming_exports is None


def test_rate_met_but_sample_count_not_met() -> None:
    # Only four names are classifiable; "default" and "$x" are skipped.
    index = _index(("fooBar", "bazQux", "oneTwo", "default"), ("Widget", "$x"))

    conventions = detect_conventions(index)

    assert conventions.naming_exports is None


def test_naming_emitted_at_sample_threshold() -> None:
    index = _index(("getUser",), ("getOrder",), ("getProduct",), ("getInvoice",), ("getPayment",))

    naming = detect_conventions(index).naming_exports

    assert naming is not None
    assert naming.dominant == "camelCase"
    assert naming.count == 5
    assert naming.percentage == 100


def test_naming_omitted_when_rate_below_threshold() -> None:
    camel = tuple(f"value{i}Name" for i in range(69))
    pascal = tuple(f"Value{i}Name" for i in range(31))
    index = _index(camel, pascal)

    assert detect_conventions(index).naming_exports is None


def test_four_of_five_split_is_emitted() -> None:
    index = _index(("fooBar", "bazQux", "oneTwo", "threeFour", "Widget"))

    naming = detect_conventions(index).naming_exports

    assert naming is not None
    assert naming.dominant == "camelCase"
    assert naming.count == 4
    assert naming.percentage == 80


def test_naming_emitted_at_exact_rate_threshold() -> None:
    camel = tuple(f"value{i}Name" for i in range(70))
    pascal = tuple(f"Value{i}Name" for i in range(30))
    index = _index(camel, pascal)

    naming = detect_conventions(index).naming_exports

    assert naming is not None
    assert naming.dominant == "camelCase"
    assert naming.count == 70
    assert naming.percentage == 70


def test_percentage_rounds_half_up() -> None:
    index = _index(tuple(f"item{i}Key" for i in range(7)) + ("MAX_SIZE",))

    naming = detect_conventions(index).naming_exports

    assert naming is not None
    assert naming.percentage == 88


def test_tie_resolves_to_first_seen_style() -> None:
    index = _index(("fooBar",), ("FooBar",))

    naming = detect_conventions(index, min_samples=1, min_match_rate=0.5).naming_exports

    assert naming is not None
    assert naming.dominant == "camelCase"
    assert naming.count == 1
    assert naming.percentage == 50


def test_thresholds_are_configurable() -> None:
    index = _index(("fooBar", "bazQux"))

    assert detect_conventions(index).naming_exports is None
    assert detect_conventions(index, min_samples=2).naming_exports is not None


def test_empty_index_yields_empty_record() -> None:
    conventions = detect_conventions(IntelIndex())

    assert conventions.naming_exports is None
    assert conventions.directories == {}
    assert conventions.suffixes == {}
