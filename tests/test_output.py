import numpy as np
from PIL import Image

import main
from renderer.image_output import save_image, to_image_array


def test_to_image_array_flips_rows_and_transposes():
    frame = np.zeros((2, 3, 3))
    frame[1, 0] = (1.0, 0.5, 0.0)  # right column, bottom row
    image = to_image_array(frame)
    assert image.shape == (3, 2, 3)
    assert image.dtype == np.uint8
    assert tuple(image[2, 1]) == (255, 127, 0)
    assert not image[0].any()


def test_to_image_array_clips():
    frame = np.full((1, 1, 3), 2.0)
    frame[0, 0, 2] = -1.0
    assert tuple(to_image_array(frame)[0, 0]) == (255, 255, 0)


def test_save_image_creates_directories(tmp_path):
    frame = np.zeros((4, 2, 3))
    frame[:, :, 1] = 1.0
    path = save_image(frame, str(tmp_path / "nested" / "frame.png"))
    with Image.open(path) as img:
        assert img.size == (4, 2)
        assert img.mode == "RGB"
        assert img.getpixel((0, 0)) == (0, 255, 0)


SCENE = """\
size 9 7
output {output}
camera 0 0 5 0 0 0 0 1 0 45
ambient 0.5 0.5 0.5
sphere 0 0 0 1
"""


def test_cli_renders_scene(tmp_path):
    out = tmp_path / "render.png"
    scene_file = tmp_path / "scene.test"
    scene_file.write_text(SCENE.format(output=out))
    assert main.main([str(scene_file), "--workers", "1", "--quiet"]) == 0
    with Image.open(out) as img:
        assert img.size == (9, 7)
        assert img.getpixel((4, 3)) == (127, 127, 127)
        assert img.getpixel((0, 0)) == (0, 0, 0)


def test_cli_output_and_depth_overrides(tmp_path):
    scene_file = tmp_path / "scene.test"
    scene_file.write_text(SCENE.format(output=tmp_path / "ignored.png"))
    out = tmp_path / "chosen.png"
    code = main.main([str(scene_file), "--output", str(out), "--max-depth", "0",
                      "--workers", "1", "--quiet"])
    assert code == 0
    assert out.exists()
    assert not (tmp_path / "ignored.png").exists()


def test_cli_reports_bad_scene(tmp_path, capsys):
    scene_file = tmp_path / "broken.test"
    scene_file.write_text("size 4\n")
    assert main.main([str(scene_file), "--quiet"]) == 1
    assert "broken.test:1" in capsys.readouterr().err


def test_cli_reports_missing_scene(tmp_path, capsys):
    assert main.main([str(tmp_path / "missing.test"), "--quiet"]) == 1
    assert "Error" in capsys.readouterr().err
