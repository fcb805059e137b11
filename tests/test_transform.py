from pytest import approx, raises

from gisscale import BoundingBox, ScaleContext, get_transform


def test_box_expand_and_union():
    box = BoundingBox.from_point(1.0, 1.0).expand(3.0, -1.0)
    assert box == BoundingBox(1.0, 3.0, -1.0, 1.0)
    assert box.union(None) is box
    assert box.union(BoundingBox(0.0, 2.0, 0.0, 5.0)) == BoundingBox(0.0, 3.0, -1.0, 5.0)
    assert (box.width, box.height) == (2.0, 2.0)
    assert box.corners() == ((1.0, -1.0), (3.0, 1.0))


def test_fit_square_box():
    scale = get_transform(BoundingBox(0.0, 10.0, 0.0, 10.0), 130, 130)
    assert scale.scale == approx(10.0)
    assert scale.forward((0.0, 0.0)) == approx((15.0, 115.0))
    assert scale.forward((10.0, 10.0)) == approx((115.0, 15.0))


def test_fit_keeps_aspect_ratio_and_centres():
    scale = get_transform(BoundingBox(0.0, 200.0, 0.0, 10.0), 230, 130)
    assert scale.scale == approx(1.0)
    assert scale.forward((0.0, 0.0)) == approx((15.0, 70.0))
    assert scale.forward((200.0, 10.0)) == approx((215.0, 60.0))


def test_fit_single_point_lands_in_centre():
    scale = get_transform(BoundingBox.from_point(3.0, 4.0), 130, 130)
    assert scale.scale == 1.0
    assert scale.forward((3.0, 4.0)) == approx((65.0, 65.0))


def test_backward_inverts_forward():
    scale = ScaleContext(offset_x=-3.0, offset_y=2.0, scale=4.0, height=300.0)
    pt = (12.5, -7.25)
    assert scale.backward(scale.forward(pt)) == approx(pt)


def test_fit_needs_room_inside_border():
    with raises(ValueError):
        get_transform(BoundingBox(0.0, 1.0, 0.0, 1.0), 20, 200)
