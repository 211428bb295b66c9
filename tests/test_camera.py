from blocky.camera import Camera


def test_default_position_is_origin():
    assert Camera().position == (0.0, 0.0)


def test_translate_within_bounds():
    cam = Camera()
    cam.translate(10, -20)
    assert cam.position == (10.0, -20.0)


def test_translate_clamps_to_default_boundary():
    cam = Camera()
    cam.translate(500, -500)
    assert cam.position == (100.0, -100.0)


def test_set_position_clamps():
    cam = Camera((0, 0), (30, 40))
    cam.set_position(-1000, 1000)
    assert cam.position == (-30.0, 40.0)


def test_constructor_does_not_clamp():
    cam = Camera((500, 0), (10, 10))
    assert cam.position == (500.0, 0.0)


def test_set_boundary_applies_on_next_move():
    cam = Camera()
    cam.set_position(80, 80)
    cam.set_boundary(50, 50)
    assert cam.position == (80.0, 80.0)
    cam.translate(0, 0)
    assert cam.position == (50.0, 50.0)


def test_translate_is_cumulative():
    cam = Camera()
    cam.translate(5, 5)
    cam.translate(5, 5)
    cam.set_position(*cam.position)
    assert cam.position == (10.0, 10.0)