from datetime import datetime, timezone

from openlaunch.core.pagination import decode_cursor, encode_cursor
from openlaunch.schemas.common import KeysetCursor


def test_keyset_cursor_roundtrip():
    cursor = KeysetCursor(created_at=datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc), id="p-1")
    decoded = KeysetCursor.decode(cursor.encode())
    assert decoded == cursor


def test_keyset_cursor_payload_is_versioned():
    cursor = KeysetCursor(created_at=datetime(2024, 5, 1), id="p-1")
    payload = decode_cursor(cursor.encode())
    assert payload == {"v": 1, "created_at": "2024-05-01T00:00:00", "id": "p-1"}


def test_keyset_cursor_rejects_garbage():
    assert KeysetCursor.decode(None) is None
    assert KeysetCursor.decode("") is None
    assert KeysetCursor.decode("not-base64!!!") is None


def test_keyset_cursor_rejects_foreign_payloads():
    assert KeysetCursor.decode(encode_cursor({"id": "p-1"})) is None
    assert KeysetCursor.decode(encode_cursor({"v": 2, "created_at": "2024-05-01T00:00:00", "id": "p-1"})) is None
    assert KeysetCursor.decode(encode_cursor({"v": 1, "created_at": "yesterday", "id": "p-1"})) is None
    assert KeysetCursor.decode(encode_cursor({"v": 1, "created_at": "2024-05-01T00:00:00", "id": "p-1", "extra": 1})) is None
