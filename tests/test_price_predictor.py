import pytest

from roomprice.adapters.reference_market import ReferenceMarketData
from roomprice.domain.errors import ValidationError
from roomprice.domain.features import RoomFeatures
from roomprice.domain.ports import ReferenceListing
from roomprice.domain.weights import PricingWeights
from roomprice.services.price_predictor import PricePredictor


def test_predict_price_university_private_room(predictor, university_room):
    result = predictor.predict_price(university_room)

    assert result.predicted_price == 620
    assert (result.price_range.min, result.price_range.max) == (527, 713)
    assert result.similar_listings == 1
    assert result.confidence == 65
    assert result.market_comparison == "above"
    assert result.market_average == 450
    assert "38% above market average" in result.insights[0]
    assert "walking distance to university" in result.insights[1]
    # size 18 and 3 amenities sit in the silent bands, private has no type insight
    assert len(result.insights) == 2


def test_predict_price_accepts_camel_case_and_model(predictor, university_room, university_room_camel):
    from_snake = predictor.predict_price(university_room)
    from_camel = predictor.predict_price(university_room_camel)
    from_model = predictor.predict_price(RoomFeatures(**university_room))
    assert from_snake == from_camel == from_model


def test_predict_price_is_deterministic(predictor, university_room):
    assert predictor.predict_price(university_room) == predictor.predict_price(university_room)


def test_suggested_price_tiers(predictor, university_room):
    tiers = predictor.get_suggested_price(university_room)
    assert tiers.model_dump() == {
        "recommended": 620,
        "competitive": 527,
        "premium": 713,
        "budget": 558,
    }


def test_empty_market_bucket_uses_default_average(predictor):
    result = predictor.predict_price(
        {
            "location": "uptown",
            "size": 20,
            "room_type": "studio",
            "distance_to_university": 3,
        }
    )
    assert result.market_average == 400
    assert result.similar_listings == 0
    assert result.confidence == 60


def test_unknown_location_still_prices(predictor):
    result = predictor.predict_price(
        {"location": "Atlantis", "size": 20, "room_type": "shared", "distance_to_university": 3}
    )
    # 252 - 45 = 207 -> 210
    assert result.predicted_price == 210
    assert result.market_comparison == "below"


def test_building_blocks(predictor, university_room):
    assert predictor.count_similar(university_room) == 1
    assert predictor.market_average("University", "private") == 450
    assert predictor.market_average("nowhere", "private") == 400


@pytest.mark.parametrize(
    "field, value",
    [
        ("size", 0),
        ("size", -5),
        ("distance_to_university", -0.1),
        ("floor", -1),
        ("room_type", "penthouse"),
        ("size", float("inf")),
        ("size", float("nan")),
        ("distance_to_university", float("inf")),
    ],
)
def test_invalid_features_raise_validation_error(predictor, university_room, field, value):
    payload = university_room | {field: value}
    with pytest.raises(ValidationError) as exc:
        predictor.predict_price(payload)
    assert field in exc.value.fields


def test_camel_case_errors_report_python_field_names(predictor, university_room_camel):
    payload = university_room_camel | {"roomType": "loft"}
    with pytest.raises(ValidationError) as exc:
        predictor.predict_price(payload)
    assert exc.value.fields == ["room_type"]


def test_missing_required_field(predictor, university_room):
    payload = {k: v for k, v in university_room.items() if k != "size"}
    with pytest.raises(ValidationError, match="size"):
        predictor.predict_price(payload)


def test_non_mapping_input_is_rejected(predictor):
    with pytest.raises(ValidationError):
        predictor.predict_price(["university", 18])


def test_direct_model_construction_validates():
    with pytest.raises(ValueError):
        RoomFeatures(location="suburb", size=-1, room_type="private", distance_to_university=1)


def test_swapped_market_data_changes_only_market_outputs(university_room):
    market = ReferenceMarketData.from_records(
        [
            ReferenceListing(location="university", size=s, room_type="private", price=700)
            for s in (10, 15, 20, 25)
        ]
    )
    result = PricePredictor(market=market).predict_price(university_room)

    assert result.predicted_price == 620
    assert result.similar_listings == 4
    assert result.confidence == 80
    assert result.market_average == 700
    assert result.market_comparison == "below"
    assert result.insights[0] == "This is a great deal! 11% below market average"


def test_injected_default_market_average(university_room):
    predictor = PricePredictor(
        market=ReferenceMarketData.from_records([]),
        weights=PricingWeights(default_market_average=620),
    )
    result = predictor.predict_price(university_room)
    assert result.market_comparison == "fair"
    assert result.insights[0] == "Fair market price for this location and features"


@pytest.mark.parametrize(
    "asking, status, delta",
    [
        (500, "low", 120),
        (527, "good", 93),
        (600, "good", 20),
        (713, "good", -93),
        (800, "high", -180),
    ],
)
def test_assess_listed_price(predictor, university_room, asking, status, delta):
    assessment = predictor.assess_listed_price(university_room, asking)
    assert assessment.status == status
    assert assessment.delta == delta
    assert assessment.predicted_price == 620
