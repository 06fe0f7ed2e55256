from app.cache import cache_stats
from app.schemas.recommend import CandidateItem
from app.services.recommender import rank_candidates, score, similar_products


REFERENCE = CandidateItem(id="ref", brand="Everlane", garment_class="tops", gender="women", price=60.0)


def _item(id, brand="Everlane", garment_class="tops", gender="women", price=60.0):
    return CandidateItem(id=id, brand=brand, garment_class=garment_class, gender=gender, price=price)


def test_identical_items_score_five():
    assert score(_item("a"), REFERENCE) == 5
    assert score(_item("b", price=95.0), REFERENCE) == 5


def test_item_differing_everywhere_scores_zero():
    other = _item("z", brand="J.Crew", garment_class="shoes", gender="men", price=300.0)
    assert score(other, REFERENCE) == 0


def test_price_band_is_strict():
    assert score(_item("a", price=110.0), REFERENCE) == 4
    assert score(_item("a", price=109.99), REFERENCE) == 5


def test_missing_gender_on_both_sides_counts_as_match():
    ref = CandidateItem(brand="A", garment_class="tops", price=10.0)
    cand = CandidateItem(brand="B", garment_class="tops", price=500.0)
    assert score(cand, ref) == 2


def test_ranking_is_stable_for_ties():
    pool = [
        _item("low", brand="Other", garment_class="shoes", gender="men", price=999.0),
        _item("tie1", brand="Other"),
        _item("top"),
        _item("tie2", brand="Other"),
        _item("tie3", brand="Other"),
    ]
    ranked = rank_candidates(REFERENCE, pool)
    assert [s.item.id for s in ranked] == ["top", "tie1", "tie2", "tie3", "low"]
    assert [s.score for s in ranked] == [5, 3, 3, 3, 0]


def test_similar_excludes_reference_and_duplicates():
    pool = [_item("ref"), _item("a"), _item("b", brand="Other"), _item("a", brand="Other")]
    result = similar_products(REFERENCE, pool, limit=10)
    assert [s.item.id for s in result] == ["a", "b"]
    assert result[0].score == 5


def test_similar_respects_limit():
    pool = [_item(str(i)) for i in range(10)]
    assert len(similar_products(REFERENCE, pool, limit=3)) == 3
    assert len(similar_products(REFERENCE, pool)) == 6


def test_similar_endpoint(client, auth):
    payload = {
        "reference": REFERENCE.model_dump(),
        "candidates": [
            _item("x", brand="Other", gender="men").model_dump(),
            _item("y").model_dump(),
        ],
        "limit": 5,
    }
    r = client.post("/v1/recommend/similar", json=payload, headers=auth)
    assert r.status_code == 200
    items = r.json()["items"]
    assert [i["item"]["id"] for i in items] == ["y", "x"]
    assert [i["score"] for i in items] == [5, 2]

    again = client.post("/v1/recommend/similar", json=payload, headers=auth)
    assert again.json() == r.json()


def test_similar_zero_limit_is_empty():
    assert similar_products(REFERENCE, [_item("a"), _item("b")], limit=0) == []


def test_similar_endpoint_caches_response(client, auth):
    payload = {"reference": REFERENCE.model_dump(), "candidates": [_item("y").model_dump()]}
    client.post("/v1/recommend/similar", json=payload, headers=auth)
    assert cache_stats()["entries"] == 1
    client.get("/v1/sizes/charts/women/tops", headers=auth)
    assert cache_stats()["entries"] == 1
