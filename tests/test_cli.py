import json

from survex3d.cli import main


def test_demo_then_info(tmp_path, capsys):
    out = tmp_path / "demo.3d"
    assert main(["demo", str(out)]) == 0
    assert main(["info", str(out)]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert doc["header"]["title"] == "Demo cave"
    assert len(doc["legs"]) == 5


def test_info_summary(tmp_path, capsys):
    out = tmp_path / "demo.3d"
    main(["demo", str(out)])
    assert main(["info", "--summary", str(out)]) == 0
    assert "labels=5, lines=5" in capsys.readouterr().out


def test_stations_listing(tmp_path, capsys):
    out = tmp_path / "demo.3d"
    main(["demo", str(out)])
    assert main(["stations", str(out)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split("\t")[0] == "demo.entrance.0"
    assert len(lines) == 5


def test_to_json(tmp_path):
    src = tmp_path / "demo.3d"
    dst = tmp_path / "demo.json"
    main(["demo", str(src)])
    assert main(["to-json", str(src), str(dst)]) == 0
    doc = json.loads(dst.read_text(encoding="utf-8"))
    assert doc["bounds"]["max_x"] == 18.02


def test_unrecognized_file_exits_2(tmp_path, capsys):
    bad = tmp_path / "bad.3d"
    bad.write_bytes(b"hello\n")
    assert main(["info", str(bad)]) == 2
    assert "not a Survex 3D file" in capsys.readouterr().err


def test_missing_file_exits_2(tmp_path, capsys):
    missing = tmp_path / "missing.3d"
    assert main(["info", str(missing)]) == 2
    assert main(["info", "--summary", str(missing)]) == 2
    assert "cannot read file" in capsys.readouterr().err
