import logging

from pytest import mark, raises

from gisscale import BoundingBox, ExtractOptions, MalformedTokenError, ScaleContext
from gisscale import compute_bounding_box, extract_scaled_points


def test_box_over_all_points():
    assert compute_bounding_box("1 2,3 4,5 6") == BoundingBox(1.0, 5.0, 2.0, 6.0)


def test_box_uses_middle_points_too():
    assert compute_bounding_box("0 0,-3 9,1 1") == BoundingBox(-3.0, 1.0, 0.0, 9.0)


@mark.parametrize("point_set", ["1 2", "1 2,3 4,5 6", "5 -1,-2 7,0 0", "1.5 1e3,-4 2", "+.5 -2.,3E-2 4"])
def test_box_min_below_max(point_set):
    box = compute_bounding_box(point_set)
    assert box.min_x <= box.max_x
    assert box.min_y <= box.max_y


def test_existing_box_only_grows():
    box = BoundingBox(1.0, 5.0, 2.0, 6.0)
    assert compute_bounding_box("0 0", box) == BoundingBox(0.0, 5.0, 0.0, 6.0)
    assert compute_bounding_box("3 3", box) == box


def test_folding_a_set_into_its_own_box_is_idempotent():
    point_set = "4 -2,7 1,0.5 3"
    box = compute_bounding_box(point_set)
    assert compute_bounding_box(point_set, box) == box


def test_box_rejects_blank_after_comma():
    # " 3 4" splits into an empty x
    with raises(MalformedTokenError):
        compute_bounding_box("1 2, 3 4")


def test_box_trims_coordinates_only():
    assert compute_bounding_box("1 2 ,3 4") == BoundingBox(1.0, 3.0, 2.0, 4.0)


@mark.parametrize("point_set", ["1", "1 2,3", "a b", "1 2,3 y", "", "nan 1", "inf 1", "1 -infinity", "1_0 2"])
def test_box_rejects_malformed_tokens(point_set):
    with raises(MalformedTokenError):
        compute_bounding_box(point_set)


def test_malformed_error_carries_token():
    with raises(MalformedTokenError) as exc:
        compute_bounding_box("1 2,3 oops")
    assert exc.value.token == "3 oops"
    assert isinstance(exc.value, ValueError)


def test_extract_points():
    assert extract_scaled_points("1 2,3 4") == [(1.0, 2.0), (3.0, 4.0)]


def test_extract_linear():
    assert extract_scaled_points("1 2,3 4", None, True) == [1.0, 2.0, 3.0, 4.0]


def test_extract_strips_parentheses():
    assert extract_scaled_points("(1 2),(3 4)") == extract_scaled_points("1 2,3 4")


def test_extract_scales_with_flip():
    scale = ScaleContext(offset_x=0, offset_y=0, scale=2, height=100)
    assert extract_scaled_points("10 10", scale) == [(20.0, 80.0)]


def test_extract_scales_with_offset():
    scale = ScaleContext(offset_x=5, offset_y=-5, scale=0.5, height=10)
    assert extract_scaled_points("7 5,5 -5", scale, True) == [1.0, 5.0, 0.0, 10.0]


def test_empty_coordinate_becomes_origin(caplog):
    with caplog.at_level(logging.WARNING, logger="gisscale.points"):
        pts = extract_scaled_points("1 2,,3 4,5")
    assert pts == [(1.0, 2.0), (0.0, 0.0), (3.0, 4.0), (0.0, 0.0)]
    assert len([r for r in caplog.records if r.name == "gisscale.points"]) == 2


def test_empty_coordinate_is_not_scaled():
    scale = ScaleContext(offset_x=1, offset_y=1, scale=3, height=50)
    assert extract_scaled_points("(),2 2", scale) == [(0.0, 0.0), (3.0, 47.0)]


def test_empty_coordinate_hook_and_silence(caplog):
    seen = []
    opts = ExtractOptions(warn_on_empty=False, on_empty=seen.append)
    with caplog.at_level(logging.WARNING, logger="gisscale.points"):
        pts = extract_scaled_points("1 2, ", options=opts)
    assert pts == [(1.0, 2.0), (0.0, 0.0)]
    assert seen == [" "]
    assert caplog.records == []


@mark.parametrize("point_set", ["1 2,x 4", "nan 1", "inf 1", "1_0 2", "(1 NaN)"])
def test_extract_rejects_garbage(point_set):
    with raises(MalformedTokenError):
        extract_scaled_points(point_set)


def test_extract_blank_after_comma_is_empty_coordinate():
    assert extract_scaled_points("1 2, 3 4") == [(1.0, 2.0), (0.0, 0.0)]
