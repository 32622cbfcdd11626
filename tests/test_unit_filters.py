from vehicle_rental.utils.filters import fmt_iso_local, fmt_money


def test_fmt_money():
    assert fmt_money(165) == "$165.00"
    assert fmt_money(59.97) == "$59.97"
    assert fmt_money(None) == "$0.00"


def test_fmt_iso_local_converts_utc_to_zone():
    # NZDT is UTC+13 in January
    assert fmt_iso_local("2030-01-10T00:30:00+00:00") == "10/01/2030 13:30"
    assert fmt_iso_local("2030-01-10T00:30:00Z", "UTC") == "10/01/2030 00:30"


def test_fmt_iso_local_naive_assumed_utc():
    assert fmt_iso_local("2030-07-01 12:00:00", "Europe/London") == "01/07/2030 13:00"


def test_fmt_iso_local_date_only_and_garbage():
    assert fmt_iso_local("2030-01-10") == "10/01/2030"
    assert fmt_iso_local("not a date") == "not a date"
    assert fmt_iso_local("") == ""
    assert fmt_iso_local(None) == ""


def test_fmt_iso_local_unknown_zone_falls_back_to_utc():
    assert fmt_iso_local("2030-01-10T00:30:00+00:00", "Mars/Olympus") == "10/01/2030 00:30"
