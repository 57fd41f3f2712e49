from main import create_world, main


def test_create_world_has_reference_spheres():
    world = create_world()
    assert len(world) == 2
    assert [s.radius for s in world.objects] == [0.5, 100]


def test_main_writes_ppm(tmp_path):
    out = tmp_path / "render.ppm"
    assert main(["--output", str(out), "--width", "32"]) == 0
    lines = out.read_text().splitlines()
    assert lines[:3] == ["P3", "32 18", "255"]
    assert len(lines) == 3 + 32 * 18


def test_main_writes_png(tmp_path):
    out = tmp_path / "render.png"
    assert main(["--output", str(out), "--format", "png", "--width", "16", "--aspect-ratio", "1"]) == 0
    assert out.exists()


def test_main_reports_sink_failure(tmp_path, capsys):
    out = tmp_path / "nope" / "render.ppm"
    assert main(["--output", str(out), "--width", "8"]) == 1
    assert "Error writing image" in capsys.readouterr().out


def test_main_rejects_bad_width(tmp_path):
    assert main(["--output", str(tmp_path / "x.ppm"), "--width", "0"]) == 2
