import pytest

from leveldbpy.filename import (
    FileType,
    current_file_name,
    descriptor_file_name,
    info_log_file_name,
    lock_file_name,
    log_file_name,
    make_file_name,
    numbered_info_log_file_name,
    old_info_log_file_name,
    parse_filename,
    sst_table_file_name,
    table_file_name,
    temp_file_name,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("CURRENT", (0, FileType.CURRENT_FILE)),
        ("LOCK", (0, FileType.DB_LOCK_FILE)),
        ("LOG", (0, FileType.INFO_LOG_FILE)),
        ("LOG.old", (0, FileType.INFO_LOG_FILE)),
        ("MANIFEST-12", (12, FileType.DESCRIPTOR_FILE)),
        ("000005.log", (5, FileType.LOG_FILE)),
        ("7.sst", (7, FileType.TABLE_FILE)),
        ("7.ldb", (7, FileType.TABLE_FILE)),
        ("3.dbtmp", (3, FileType.TEMP_FILE)),
        ("abc.log", (0, FileType.LOG_FILE)),
    ],
)
def test_parse_valid(name, expected):
    assert parse_filename(name) == expected


@pytest.mark.parametrize(
    "name",
    ["MANIFEST-", "MANIFEST-x", "3.txt", "noext", "5.tar.log", "MANIFEST-1a"],
)
def test_parse_invalid(name):
    assert parse_filename(name) is None


def test_manifest_largest_number():
    assert parse_filename("MANIFEST-18446744073709551615") == (
        18446744073709551615,
        FileType.DESCRIPTOR_FILE,
    )
    assert parse_filename("MANIFEST-18446744073709551616") is None


def test_numbered_names_use_make_file_name():
    assert log_file_name("db", 5) == make_file_name("db", 5, "log")
    assert table_file_name("db", 5) == make_file_name("db", 5, "ldb")
    assert sst_table_file_name("db", 5) == make_file_name("db", 5, "sst")
    assert descriptor_file_name("db", 3) == make_file_name("db", 3, "MANIFEST")
    assert numbered_info_log_file_name("db", 2) == make_file_name("db", 2, "LOG")


@pytest.mark.parametrize(
    "builder, file_type",
    [
        (log_file_name, FileType.LOG_FILE),
        (table_file_name, FileType.TABLE_FILE),
        (sst_table_file_name, FileType.TABLE_FILE),
    ],
)
def test_round_trip(builder, file_type):
    base = builder("some/db", 42).rsplit("/", 1)[-1]
    assert parse_filename(base) == (42, file_type)


def test_fixed_names():
    assert current_file_name("db") == "db/CURRENT"
    assert lock_file_name("db") == "db/LOCK"
    assert info_log_file_name("db") == "db/LOG"
    assert old_info_log_file_name("db") == "db/LOG.old"
    assert temp_file_name("db", 4) == "db/LOG.4"


@pytest.mark.parametrize("builder", [table_file_name, sst_table_file_name])
def test_table_number_must_be_positive(builder):
    with pytest.raises(ValueError):
        builder("db", 0)