import io

import pytest
from PIL import Image

from algorithms import create_algorithm
from engine import Visualizer
from graph import Color, FrameError
from graph.shapes import draw_arrow
from ui import GIFRenderer, ImageFrame
from conftest import RecordingFrame, build_path_config


class TestImageFrame:

    def test_rectangle_is_exclusive_at_bottom_right(self):
        frame = ImageFrame(10, 10)
        frame.draw_rectangle(2, 2, 5, 4, (255, 0, 0))
        assert frame.pixel(2, 2) == (255, 0, 0)
        assert frame.pixel(4, 3) == (255, 0, 0)
        assert frame.pixel(5, 3) == (0, 0, 0)
        assert frame.pixel(4, 4) == (0, 0, 0)

    def test_whole_frame(self):
        frame = ImageFrame(4, 3)
        frame.draw_rectangle(0, 0, 4, 3, Color(1, 2, 3))
        assert frame.pixel(3, 2) == (1, 2, 3)

    def test_empty_rectangle_draws_nothing(self):
        frame = ImageFrame(4, 4)
        frame.draw_rectangle(2, 2, 2, 4, (255, 255, 255))
        frame.draw_rectangle(3, 3, 1, 1, (255, 255, 255))
        assert frame.pixel(2, 2) == (0, 0, 0)

    def test_out_of_bounds_raises(self):
        frame = ImageFrame(4, 4)
        with pytest.raises(FrameError):
            frame.draw_rectangle(0, 0, 5, 2, (255, 255, 255))
        with pytest.raises(FrameError):
            frame.draw_rectangle(-1, 0, 2, 2, (255, 255, 255))


class TestArrow:

    @pytest.mark.parametrize("horizontal, forward", [
        (True, True), (True, False), (False, True), (False, False),
    ])
    def test_three_squares(self, horizontal, forward):
        frame = RecordingFrame(40, 40)
        draw_arrow(frame, 20, 20, 2, horizontal, forward, Color(0, 0, 0))
        assert len(frame.rectangles) == 3
        assert all(x1 - x0 == 2 and y1 - y0 == 2 for x0, y0, x1, y1, _ in frame.rectangles)

    def test_head_points_forward(self):
        frame = RecordingFrame(40, 40)
        draw_arrow(frame, 20, 20, 2, True, True, Color(0, 0, 0))
        tail_a, tail_b, head = frame.rectangles
        assert head[0] > tail_a[0] == tail_b[0]

        frame = RecordingFrame(40, 40)
        draw_arrow(frame, 20, 20, 2, True, False, Color(0, 0, 0))
        tail_a, tail_b, head = frame.rectangles
        assert head[0] < tail_a[0] == tail_b[0]


class TestGIFRenderer:

    def test_writes_animated_gif(self, tmp_path, diamond_path_config):
        output = tmp_path / "bfs.gif"
        config = diamond_path_config
        renderer = GIFRenderer(output, config.frame_delay, config.frame_width, config.frame_height)
        frames = Visualizer(create_algorithm("BFS", config), renderer).visualize()

        assert frames == len(renderer.frames) == 5
        with Image.open(output) as image:
            assert image.format == "GIF"
            assert image.size == (config.frame_width, config.frame_height)
            assert image.is_animated
            assert image.info["duration"] == config.frame_delay * 10
            assert image.n_frames == 5

    def test_identical_frames_keep_total_duration(self, tmp_path):
        # the end node is unreachable, so seeding and expanding the start
        # node paint the same picture twice
        config = build_path_config([(0, 0), (1, 0)], [], start=0, end=1)
        output = tmp_path / "stuck.gif"
        renderer = GIFRenderer(output, config.frame_delay, config.frame_width, config.frame_height)
        frames = Visualizer(create_algorithm("BFS", config), renderer).visualize()

        assert frames == len(renderer.frames) == 2
        with Image.open(output) as image:
            assert image.n_frames < frames
            total = 0
            for i in range(image.n_frames):
                image.seek(i)
                total += image.info["duration"]
        assert total == frames * config.frame_delay * 10

    def test_writes_to_file_object(self, chain_flow_config):
        buffer = io.BytesIO()
        config = chain_flow_config
        renderer = GIFRenderer(buffer, config.frame_delay, config.frame_width, config.frame_height)
        Visualizer(create_algorithm("FF-BFS", config), renderer).visualize()

        buffer.seek(0)
        with Image.open(buffer) as image:
            assert image.size == (180, 60)

    def test_frame_content(self, diamond_path_config):
        config = diamond_path_config
        renderer = GIFRenderer(io.BytesIO(), config.frame_delay, config.frame_width, config.frame_height)
        Visualizer(create_algorithm("BFS", config), renderer).visualize()
        first = renderer.frames[0]
        assert first.getpixel((0, 0)) == tuple(config.background)
        assert first.getpixel((30, 30)) == tuple(config.node_palette.start)

    def test_finalize_is_idempotent(self, tmp_path):
        renderer = GIFRenderer(tmp_path / "x.gif", 10, 20, 20)
        frame = renderer.begin_frame()
        frame.draw_rectangle(0, 0, 20, 20, (9, 9, 9))
        renderer.end_frame(frame)
        renderer.finalize()
        renderer.finalize()
        assert (tmp_path / "x.gif").exists()
        with pytest.raises(RuntimeError):
            renderer.end_frame(renderer.begin_frame())

    def test_no_frames_writes_nothing(self, tmp_path):
        renderer = GIFRenderer(tmp_path / "empty.gif", 10, 20, 20)
        renderer.finalize()
        assert not (tmp_path / "empty.gif").exists()
