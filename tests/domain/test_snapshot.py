from __future__ import annotations

import json

import pytest

from lib_log_buffers.domain.categories import LogCategory
from lib_log_buffers.domain.entry import LogEntry
from lib_log_buffers.domain.snapshot import SNAPSHOT_VERSION, Snapshot, SnapshotFormatError

RECORD = {
    "Timestamp": "09-03-2025 12:00:00",
    "Level": 1,
    "Type": "Warning",
    "Message": "Disk usage high",
    "RenderedLine": " | [!] Disk usage high",
    "BufferIds": ["default", "alerts"],
}


def test_to_dict_uses_wire_field_names() -> None:
    """Snapshot dictionaries use the documented keys."""

    entry = LogEntry.from_dict(RECORD)
    snapshot = Snapshot(
        buffers={"default": [entry], "alerts": [entry]},
        export_date="09-03-2025 12:30:00",
        machine="build-host",
        user="ci-user",
        session="nightly",
    )
    document = snapshot.to_dict()
    assert list(document) == ["Version", "ExportDate", "Machine", "User", "Session", "Buffers"]
    assert document["Version"] == SNAPSHOT_VERSION
    assert document["Buffers"]["alerts"] == [RECORD]
    assert snapshot.entry_count == 2


def test_json_keeps_unicode_and_reparses_to_equal_snapshot() -> None:
    """JSON output keeps non-ASCII text and parses back."""

    entry = LogEntry(
        timestamp="09-03-2025 12:00:00",
        level=0,
        category=LogCategory.SUCCESS,
        message="Größe ok",
        rendered_line="[✓] Größe ok",
    )
    snapshot = Snapshot(buffers={"default": [entry]}, session="s1")
    text = snapshot.to_json()
    assert "Größe" in text
    assert Snapshot.from_json(text) == snapshot


def test_single_object_buffer_is_wrapped_into_list() -> None:
    """A single record per buffer becomes a one-item list."""

    snapshot = Snapshot.from_dict({"Buffers": {"alerts": RECORD}})
    assert [entry.message for entry in snapshot.buffers["alerts"]] == ["Disk usage high"]


def test_null_buffers_and_null_buffer_values_are_empty() -> None:
    """Null buffers read as empty."""

    assert Snapshot.from_dict({"Buffers": None}).buffers == {}
    assert Snapshot.from_dict({"Buffers": {"audit": None}}).buffers == {"audit": []}


def test_missing_metadata_falls_back_to_defaults() -> None:
    """Absent metadata falls back to defaults."""

    snapshot = Snapshot.from_dict({"Buffers": {}})
    assert snapshot.version == SNAPSHOT_VERSION
    assert (snapshot.export_date, snapshot.machine, snapshot.user, snapshot.session) == ("", "", "", "")


def test_record_without_buffer_ids_belongs_to_its_buffer() -> None:
    """Records without ids belong to the enclosing buffer."""

    snapshot = Snapshot.from_dict({"Buffers": {"audit": [{"Message": "hello"}]}})
    entry = snapshot.buffers["audit"][0]
    assert entry.buffer_ids == ("audit",)
    assert entry.category is LogCategory.RAW
    assert entry.rendered_line == "hello"


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"Version": "1.0"},
        {"Buffers": ["default"]},
        {"Buffers": {"default": "text"}},
        {"Buffers": {"default": [{"Type": "Info"}]}},
        {"Buffers": {"default": [{"Message": "x", "Type": "Fatal"}]}},
        {"Buffers": {"default": [{"Message": "x", "Level": -1}]}},
    ],
)
def test_structurally_invalid_documents_are_rejected(payload: object) -> None:
    """Documents of the wrong shape raise ``SnapshotFormatError``."""

    with pytest.raises(SnapshotFormatError):
        Snapshot.from_dict(payload)


def test_invalid_json_is_rejected() -> None:
    """Unparseable JSON raises ``SnapshotFormatError``."""

    with pytest.raises(SnapshotFormatError, match="not valid JSON"):
        Snapshot.from_json("{not json")


def test_snapshot_format_error_is_value_error() -> None:
    """Format errors are ``ValueError`` subclasses."""

    with pytest.raises(ValueError):
        Snapshot.from_json(json.dumps({"nothing": True}))
