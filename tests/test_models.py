from datetime import datetime, timedelta, timezone

from listing_order.models import DeviceInfo, Entry


def test_to_dict_omits_empty_type_and_label():
    entry = Entry(
        "photo.png",
        "/data/photo.png",
        date=datetime(2023, 1, 1, tzinfo=timezone.utc),
        size=4096,
        write=True,
    )

    data = entry.to_dict()

    assert data == {
        "name": "photo.png",
        "path": "/data/photo.png",
        "is_dir": False,
        "date": "2023-01-01T00:00:00Z",
        "size": 4096,
        "write": True,
        "extensions": {},
    }


def test_to_dict_keeps_type_label_and_extensions():
    entry = Entry("music", "/data/music", is_dir=True, type="folder", label="Music", extensions={"mounted": True})

    data = entry.to_dict()

    assert data["type"] == "folder"
    assert data["label"] == "Music"
    assert data["extensions"] == {"mounted": True}


def test_from_dict_reads_listing_payload():
    entry = Entry.from_dict(
        {
            "name": "file2.txt",
            "path": "/test/file2.txt",
            "is_dir": False,
            "date": "2023-01-02T00:00:00Z",
            "size": 2048,
            "write": True,
            "extensions": {"thumbnail": "x"},
            "unknown": 1,
        }
    )

    assert entry.name == "file2.txt"
    assert entry.date == datetime(2023, 1, 2, tzinfo=timezone.utc)
    assert entry.size == 2048
    assert entry.write
    assert entry.extensions == {"thumbnail": "x"}


def test_from_dict_tolerates_missing_and_broken_fields():
    entry = Entry.from_dict({"name": "bare", "date": "not a date", "size": None})

    assert entry.path == ""
    assert not entry.is_dir
    assert entry.size == 0
    assert entry.date == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert entry.extensions == {}


def test_extensions_are_not_shared_between_entries():
    a = Entry("a")
    b = Entry("b")
    a.extensions["k"] = "v"

    assert b.extensions == {}


def test_device_info_to_dict():
    info = DeviceInfo(lan_ipv4=["192.168.1.2"], port=80, device_name="nas", initialized=True)

    data = info.to_dict()

    assert data["lan_ipv4"] == ["192.168.1.2"]
    assert data["port"] == 80
    assert data["device_name"] == "nas"
    assert data["initialized"] is True
    assert data["os_version"] == ""


def test_to_dict_formats_dates_like_rfc3339():
    def date_of(value):
        return Entry("x", date=value).to_dict()["date"]

    assert date_of(datetime(2023, 1, 1, 12, 30, 0, 120000, tzinfo=timezone.utc)) == "2023-01-01T12:30:00.12Z"
    assert date_of(datetime(2023, 1, 1)) == "2023-01-01T00:00:00Z"
    tokyo = timezone(timedelta(hours=9))
    assert date_of(datetime(2023, 1, 1, 9, tzinfo=tokyo)) == "2023-01-01T09:00:00+09:00"
    newfoundland = timezone(-timedelta(hours=3, minutes=30))
    assert date_of(datetime(2023, 1, 1, tzinfo=newfoundland)) == "2023-01-01T00:00:00-03:30"


def test_from_dict_reads_nanosecond_and_short_fractions():
    nano = Entry.from_dict({"name": "n", "date": "2023-01-02T03:04:05.123456789Z"})
    short = Entry.from_dict({"name": "s", "date": "2023-01-02T03:04:05.5+09:00"})

    assert nano.date == datetime(2023, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
    assert short.date == datetime(2023, 1, 2, 3, 4, 5, 500000, tzinfo=timezone(timedelta(hours=9)))


def test_date_survives_to_dict_and_back():
    original = Entry("x", date=datetime(2023, 5, 6, 7, 8, 9, 10, tzinfo=timezone.utc))

    assert Entry.from_dict(original.to_dict()).date == original.date
