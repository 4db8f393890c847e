from __future__ import annotations

import ezschdoc
from ezschdoc import objects

BLOCKS = [
    "|RECORD=1|LIBREFERENCE=RES|PARTCOUNT=2|CURRENTPARTID=1",
    "|RECORD=34|OWNERINDEX=0|TEXT=R1|NAME=Designator",
    "|RECORD=41|OWNERINDEX=0|NAME=Value|TEXT=10k",
    "|RECORD=1|LIBREFERENCE=CAP|PARTCOUNT=2|CURRENTPARTID=1",
    "|RECORD=34|OWNERINDEX=3|TEXT=C1|NAME=Designator",
    "|RECORD=41|OWNERINDEX=3|NAME=Value|TEXT=10k",
    "|RECORD=41|OWNERINDEX=3|NAME=Tolerance|TEXT=5%",
]


def _parameters(doc, component):
    return {child.name: child for child in doc.children(component) if isinstance(child, objects.Parameter)}


def test_empty_override_marks_component_not_fitted() -> None:
    doc = ezschdoc.load(BLOCKS)
    resistor = doc.objects[0]

    result = doc.apply_variant({"R1": {}})

    assert resistor.dnp is True
    assert doc.objects[3].dnp is False
    value = _parameters(doc, resistor)["Value"]
    assert value.text == "10k"
    assert value.changed is False
    assert result.not_fitted == ["R1"]
    assert result.changed_parameters == 0


def test_override_replaces_matching_parameter_text() -> None:
    doc = ezschdoc.load(BLOCKS)
    capacitor = doc.objects[3]

    result = ezschdoc.apply_variant(doc, {"C1": {"Value": "100k", "Voltage": "50V"}})

    params = _parameters(doc, capacitor)
    assert params["Value"].text == "100k"
    assert params["Value"].changed is True
    assert params["Tolerance"].text == "5%"
    assert params["Tolerance"].changed is False
    assert capacitor.dnp is False
    assert result.changed_parameters == 1
    assert _parameters(doc, doc.objects[0])["Value"].text == "10k"


def test_unknown_designator_is_skipped() -> None:
    doc = ezschdoc.load(BLOCKS)

    result = doc.apply_variant({"U9": {}, "C1": {"Value": "1u"}})

    assert result.missing_designators == ["U9"]
    assert result.changed_parameters == 1
    assert not any(obj.dnp for obj in doc.query("Component"))
    assert [item.code for item in doc.diagnostics] == ["variant-designator-missing"]


def test_designator_without_component_is_skipped() -> None:
    doc = ezschdoc.load(["|RECORD=34|TEXT=TP1"])

    result = doc.apply_variant({"TP1": {}})

    assert result.missing_designators == ["TP1"]
    assert [item.code for item in doc.diagnostics] == ["variant-designator-orphan"]
