from roomprice.analysis.insights import generate_insights
from roomprice.domain.features import RoomFeatures


def _room(**overrides) -> RoomFeatures:
    # mid-band everywhere: 3 km, 20 m2, 3 amenities, private -> no optional insight
    base = dict(
        location="university",
        size=20,
        room_type="private",
        furnished=True,
        has_wifi=True,
        has_kitchen=True,
        distance_to_university=3,
    )
    base.update(overrides)
    return RoomFeatures(**base)


def test_only_market_insight_in_neutral_bands():
    insights = generate_insights(_room(), 400, 400)
    assert insights == ("Fair market price for this location and features",)


def test_above_market_reports_rounded_percent(university_room):
    insights = generate_insights(RoomFeatures(**university_room), 620, 450)
    assert insights == (
        "This price is 38% above market average for this area",
        "Excellent location - walking distance to university",
    )


def test_below_market_reports_absolute_percent():
    insights = generate_insights(_room(), 300, 400)
    assert insights[0] == "This is a great deal! 25% below market average"


def test_below_market_percent_rounds_half_away_from_zero():
    # -37.5% -> 38% below
    insights = generate_insights(_room(), 250, 400)
    assert insights[0] == "This is a great deal! 38% below market average"


def test_far_from_campus_mentions_distance():
    assert "Consider transportation costs - 6km from campus" in generate_insights(
        _room(distance_to_university=6), 400, 400
    )
    assert "Consider transportation costs - 7.5km from campus" in generate_insights(
        _room(distance_to_university=7.5), 400, 400
    )


def test_distance_band_edges_emit_nothing():
    for km in (2, 5):
        assert len(generate_insights(_room(distance_to_university=km), 400, 400)) == 1


def test_size_insights():
    assert "Spacious room - larger than average" in generate_insights(_room(size=30), 400, 400)
    assert "Compact room - consider if space is important to you" in generate_insights(
        _room(size=10), 400, 400
    )
    for size in (15, 25):
        assert len(generate_insights(_room(size=size), 400, 400)) == 1


def test_amenity_insights_ignore_pets_policy():
    full = _room(has_parking=True, has_laundry=True)
    assert "Fully equipped with 5 amenities" in generate_insights(full, 400, 400)

    bare = _room(furnished=False, has_wifi=False, pets_allowed=True)
    assert "Limited amenities - you may need to budget for extras" in generate_insights(bare, 400, 400)

    four = _room(has_parking=True, pets_allowed=True)
    assert len(generate_insights(four, 400, 400)) == 1


def test_room_type_insights():
    assert generate_insights(_room(room_type="shared"), 400, 400)[-1] == (
        "Shared room - budget-friendly option"
    )
    assert generate_insights(_room(room_type="studio"), 400, 400)[-1] == (
        "Private studio - complete independence"
    )


def test_all_insights_fire_in_fixed_order():
    feats = _room(
        size=40,
        room_type="studio",
        has_parking=True,
        has_laundry=True,
        has_balcony=True,
        distance_to_university=1,
    )
    insights = generate_insights(feats, 900, 550)
    assert insights == (
        "This price is 64% above market average for this area",
        "Excellent location - walking distance to university",
        "Spacious room - larger than average",
        "Fully equipped with 6 amenities",
        "Private studio - complete independence",
    )


def test_insights_are_plain_text():
    feats = _room(size=10, room_type="shared", furnished=False, distance_to_university=8)
    for insight in generate_insights(feats, 200, 400):
        assert insight.isascii()
        assert insight[0].isalpha()
