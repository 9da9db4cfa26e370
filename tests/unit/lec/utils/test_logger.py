import numpy as np

from lec.utils.logger import FilePrinter, Logger
from lec.empty_circle import LECResult
from lec.voronoi.diagram import build_diagram
from lec.voronoi.rays import resolve_rays


def read_rows(path):
    return [line.split(",") for line in path.read_text().splitlines()]


def test_file_printer_buffers_until_flush(tmp_path):
    path = tmp_path / "nested" / "out.csv"
    printer = FilePrinter(str(path), header=["a", "b"])
    assert read_rows(path) == [["a", "b"]]

    printer([1, 2])
    printer(np.array([[3, 4], [5, 6]]))
    printer([(7, 8)])
    assert read_rows(path) == [["a", "b"]]

    printer.flush()
    assert read_rows(path) == [["a", "b"], ["1", "2"], ["3", "4"], ["5", "6"], ["7", "8"]]
    assert not (tmp_path / "nested" / "out-temp.csv").exists()

    printer.flush()
    assert len(read_rows(path)) == 5


def test_logger(tmp_path):
    diagram = build_diagram(np.array([[0.0, 0.0], [10.0, 0.0], [5.0, 1.0]]))
    prefix = str(tmp_path / "run")
    logger = Logger(prefix)

    ridge_r2 = np.array([-1.0, 6.76, 6.5])[:diagram.num_ridges]
    ridge_xy = np.array([[np.nan, np.nan], [2.6, 0.0], [2.5, 0.5]])[:diagram.num_ridges]
    logger.log_vertices(diagram.vertices, np.array([-1.0]))
    rays = resolve_rays(diagram)
    logger.log_ridges(diagram, ridge_xy, ridge_r2, np.zeros(diagram.num_ridges, dtype=int), rays.bounds)
    logger.log_result(LECResult(2.6, 2.6, 0.0, "ridge", 0))
    logger.finalize()

    vertices = read_rows(tmp_path / "run-vertices.csv")
    assert vertices[0] == Logger.VERTEX_HEADER
    assert vertices[1][0] == "0" and vertices[1][3:] == ["0", ""]
    assert np.allclose([float(v) for v in vertices[1][1:3]], [5.0, -12.0])

    ridges = read_rows(tmp_path / "run-ridges.csv")
    assert ridges[0] == Logger.RIDGE_HEADER
    assert [row[0] for row in ridges[1:]] == ["1", "2"]
    assert all(row[3] == "1" for row in ridges[1:])
    for row in ridges[1:]:
        k = diagram.ridge_rays[int(row[0])]
        assert np.isclose(float(row[8]), rays.bounds[k])

    result = read_rows(tmp_path / "run-result.csv")
    assert result[1] == ["2.6", "2.6", "0.0", "ridge", "0"]


def test_logger_bound_empty_for_bounded_ridges(tmp_path, random_sites):
    x, y = random_sites
    diagram = build_diagram(np.column_stack((x, y)))
    bounded = np.flatnonzero(diagram.ridge_rays < 0)
    assert bounded.size > 0
    ridge_r2 = np.full(diagram.num_ridges, -1.0)
    ridge_r2[bounded] = 1.0
    ridge_xy = np.zeros((diagram.num_ridges, 2))

    logger = Logger(str(tmp_path / "random"))
    logger.log_ridges(diagram, ridge_xy, ridge_r2, np.zeros(diagram.num_ridges, dtype=int),
                      resolve_rays(diagram).bounds)
    logger.finalize()

    ridges = read_rows(tmp_path / "random-ridges.csv")
    assert len(ridges) == 1 + bounded.size
    assert all(row[3] == "0" and row[8] == "" for row in ridges[1:])
