from catalog_client_sdk.normalizers import normalize_entity, normalize_listing


def test_listing_reads_payload_and_server_total() -> None:
    listing = normalize_listing(
        {"payload": [{"_id": "a"}, "junk", {"_id": "b"}], "total": "12"},
        page=2,
        page_size=5,
    )

    assert listing == {"rows": [{"_id": "a"}, {"_id": "b"}], "page": 2, "page_size": 5, "total": 12}


def test_listing_without_total_leaves_it_unknown() -> None:
    listing = normalize_listing({"payload": [{"_id": "a"}]})

    assert listing["total"] is None
    assert listing["page_size"] == 5


def test_listing_accepts_bare_list() -> None:
    assert normalize_listing([{"_id": "a"}])["rows"] == [{"_id": "a"}]


def test_entity_unwraps_payload() -> None:
    assert normalize_entity({"payload": {"_id": "a", "name": "Shoes"}}) == {"_id": "a", "name": "Shoes"}
    assert normalize_entity({"_id": "a"}) == {"_id": "a"}
    assert normalize_entity(None) == {}
