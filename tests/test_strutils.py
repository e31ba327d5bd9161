from softgl.strutils import ends_with, starts_with


def test_ends_with():
    assert ends_with("model.gltf", ".gltf")
    assert ends_with("abc", "")
    assert not ends_with("gltf", "model.gltf")
    assert not ends_with("model.obj", ".gltf")


def test_starts_with():
    assert starts_with("assets/model", "assets/")
    assert starts_with("abc", "")
    assert not starts_with("as", "assets")
    assert not starts_with("shaders/x", "assets")