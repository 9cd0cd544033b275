import logging
import os

from PIL import Image

import cli
from conftest import CONFIG_DIR


MAZE = os.path.join(CONFIG_DIR, "bfs_maze.txt")
FLOW = os.path.join(CONFIG_DIR, "flow_grid.txt")


def test_bfs_writes_gif(tmp_path):
    output = tmp_path / "maze.gif"
    assert cli.main(["BFS", MAZE, str(output)]) == 0
    with Image.open(output) as image:
        # 4x3 grid, node size 30, edge length 40
        assert image.size == (30 * 6 + 40 * 3, 30 * 5 + 40 * 2)


def test_max_flow_logs_result(tmp_path, caplog):
    output = tmp_path / "flow.gif"
    with caplog.at_level(logging.INFO):
        assert cli.main(["FF-BFS", FLOW, str(output)]) == 0
    assert output.exists()
    assert "maximum flow: 13" in caplog.text


def test_unknown_algorithm(tmp_path, caplog):
    assert cli.main(["DFS", MAZE, str(tmp_path / "x.gif")]) == 1
    assert "unknown algorithm" in caplog.text


def test_output_must_be_gif(tmp_path):
    assert cli.main(["BFS", MAZE, str(tmp_path / "x.png")]) == 1
    assert not (tmp_path / "x.png").exists()


def test_missing_config_file(tmp_path):
    assert cli.main(["BFS", str(tmp_path / "missing.txt"), str(tmp_path / "x.gif")]) == 1


def test_malformed_config(tmp_path, caplog):
    bad = tmp_path / "bad.txt"
    bad.write_text("[GRID DATA]\n3x1\n0\n")
    assert cli.main(["BFS", str(bad), str(tmp_path / "x.gif")]) == 1
    assert "Error:" in caplog.text
    assert not (tmp_path / "x.gif").exists()


def test_flow_config_rejected_for_bfs_layout(tmp_path):
    # path edges carry no capacity, so the flow loader refuses them
    assert cli.main(["FF-BFS", MAZE, str(tmp_path / "x.gif")]) == 1
