import json

import pytest

from ispdexa.cli import main

RESULTS = {
    "total_simulated_time": 10,
    "satisfaction": 95,
    "idleness_processing": 5,
    "idleness_communication": 7,
    "efficiency": 85,
    "communication": {
        "queue_average_time": 1,
        "communication_average_time": 2,
        "system_average_time": 3,
    },
    "processing": {
        "queue_average_time": 4,
        "processing_average_time": 5,
        "system_average_time": 6,
    },
    "users": [{"label": "alice", "number_of_tasks": 12}],
    "machines": [
        {"label": "m1", "owner": "alice", "Mflops": 100, "processing_performed": 3},
        {"label": "m2", "owner": "alice", "Mflops": 200, "processing_performed": 4},
        {"label": "m3", "owner": "alice", "Mflops": 300, "processing_performed": 5},
    ],
    "links": [
        {"label": "l1", "Mbits": 50, "communication_performed": 8},
        {"label": "l2", "Mbits": 80, "communication_performed": 9},
    ],
}


def _write(directory, data):
    (directory / "results.json").write_text(json.dumps(data), encoding="utf-8")


def test_reports_are_printed(tmp_path, capsys):
    _write(tmp_path, RESULTS)
    assert main([str(tmp_path), "--hue", "0"]) == 0
    out = capsys.readouterr().out
    assert "Total Simulated Time = 10" in out
    assert "Efficiency GOOD" in out
    assert "                        User alice" in out
    assert "m1\talice" in out
    assert "l1\t---" in out


def test_value_files_written(tmp_path):
    _write(tmp_path, RESULTS)
    assert main([str(tmp_path), "--hue", "0"]) == 0
    machines = (tmp_path / "machine_values.txt").read_text(encoding="utf-8")
    links = (tmp_path / "link_values.txt").read_text(encoding="utf-8")
    assert machines == "100_m1\n200_m2\n300_m3\n"
    assert links == "50_l1\n80_l2\n"


def test_drawings_written(tmp_path):
    _write(tmp_path, RESULTS)
    assert main([str(tmp_path), "--hue", "0"]) == 0
    links_svg = (tmp_path / "output.svg").read_text(encoding="utf-8")
    machines_svg = (tmp_path / "output_2.svg").read_text(encoding="utf-8")
    assert links_svg.startswith('<svg xmlns="http://www.w3.org/2000/svg"')
    assert links_svg.endswith("</svg>\n")
    assert "<title>l1 (num=50)</title>" in links_svg
    assert "<title>m3 (num=300)</title>" in machines_svg
    assert machines_svg.count("<circle ") == 3


def test_same_hue_gives_same_drawing(tmp_path):
    _write(tmp_path, RESULTS)
    main([str(tmp_path), "--hue", "0.25"])
    first = (tmp_path / "output_2.svg").read_text(encoding="utf-8")
    main([str(tmp_path), "--hue", "0.25"])
    second = (tmp_path / "output_2.svg").read_text(encoding="utf-8")
    assert first == second


def test_missing_results_fails(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    assert "error" in capsys.readouterr().err
    assert not (tmp_path / "output.svg").exists()


def test_invalid_json_fails(tmp_path):
    (tmp_path / "results.json").write_text("{not json", encoding="utf-8")
    assert main([str(tmp_path)]) == 1


def test_non_object_results_fail(tmp_path):
    (tmp_path / "results.json").write_text("[1, 2]", encoding="utf-8")
    assert main([str(tmp_path)]) == 1


def test_nothing_to_draw_is_skipped(tmp_path, capsys):
    data = dict(RESULTS, links=[])
    _write(tmp_path, data)
    assert main([str(tmp_path), "--hue", "0"]) == 0
    captured = capsys.readouterr()
    assert "link_values.txt: nothing to draw" in captured.err
    assert not (tmp_path / "output.svg").exists()
    assert (tmp_path / "output_2.svg").exists()


@pytest.mark.parametrize("hue", ["1.5", "-0.1", "red"])
def test_bad_hue_rejected(tmp_path, hue):
    _write(tmp_path, RESULTS)
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path), "--hue", hue])
    assert excinfo.value.code == 2