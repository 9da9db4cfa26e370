import numpy as np
from pathlib import Path
from csv import writer
from shutil import copyfile
from os import remove
from os.path import exists
from collections.abc import Collection


class FilePrinter:
    """
    Buffers rows and writes them to a csv file.
    Rows are appended to a temporary copy which then replaces the original,
    so an interrupted write never leaves a truncated file behind.
    """
    def __init__(
            self,
            file_name: str,
            header: Collection[str] = None,
            create_dir: bool = True
    ):
        self.file_name = file_name
        self.temp_file_path = '-temp.'.join(self.file_name.rsplit('.', 1))
        self.buffer = []
        self._create_file(header, create_dir)

    def __call__(self, rows):
        """
        Adds one row, or a 2d array / list of rows, to the buffer.
        """
        if isinstance(rows, np.ndarray):
            self.buffer.extend(np.atleast_2d(rows).tolist())
        elif len(rows) > 0 and isinstance(rows[0], (list, tuple)):
            self.buffer.extend(rows)
        else:
            self.buffer.append(list(rows))

    def _print(self):
        with open(self.temp_file_path, 'a', newline='') as f:
            writer(f).writerows(self.buffer)

    def _copy_and_replace(self):
        try:
            if exists(self.file_name):
                copyfile(self.file_name, self.temp_file_path)
            self._print()
            copyfile(self.temp_file_path, self.file_name)
        finally:
            if exists(self.temp_file_path):
                remove(self.temp_file_path)

    def flush(self):
        if self.buffer:
            self._copy_and_replace()
            self.buffer = []

    def _create_file(self, header: Collection[str], create_dir: bool):
        p = Path(self.file_name)
        if create_dir:
            p.parent.mkdir(parents=True, exist_ok=True)
        with open(self.file_name, 'w', newline='') as f:
            if header is not None:
                writer(f).writerow(header)


class Logger:
    """
    Writes the candidates examined by one empty circle search to
    `<prefix>-vertices.csv`, `<prefix>-ridges.csv` and `<prefix>-result.csv`.
    """
    VERTEX_HEADER = ["vertex", "x", "y", "inside", "radius2"]
    RIDGE_HEADER = ["ridge", "site0", "site1", "unbounded", "x", "y", "radius2", "rejected", "bound"]
    RESULT_HEADER = ["radius", "x", "y", "phase", "n_rejected"]

    def __init__(self, file_prefix: str, create_dir: bool = True):
        self.file_prefix = file_prefix
        self.vertex_printer = FilePrinter(
            f"{file_prefix}-vertices.csv", header=self.VERTEX_HEADER, create_dir=create_dir
        )
        self.ridge_printer = FilePrinter(
            f"{file_prefix}-ridges.csv", header=self.RIDGE_HEADER, create_dir=create_dir
        )
        self.result_printer = FilePrinter(
            f"{file_prefix}-result.csv", header=self.RESULT_HEADER, create_dir=create_dir
        )

    def log_vertices(self, vertices: np.ndarray, radius2: np.ndarray):
        inside = radius2 >= 0
        self.vertex_printer([
            [i, vertices[i, 0], vertices[i, 1], int(inside[i]), radius2[i] if inside[i] else ""]
            for i in range(vertices.shape[0])
        ])

    def log_ridges(
            self,
            diagram,
            ridge_xy: np.ndarray,
            ridge_r2: np.ndarray,
            rejected: np.ndarray,
            bounds: np.ndarray = None,
    ):
        """
        One row per ridge that met the hull, best intersection only.
        `bound` is the per-ray third-site bound, empty for bounded ridges.
        """
        rows = []
        for r in np.flatnonzero(ridge_r2 >= 0):
            k = diagram.ridge_rays[r]
            rows.append([
                r,
                diagram.ridge_points[r, 0],
                diagram.ridge_points[r, 1],
                int(diagram.is_unbounded(r)),
                ridge_xy[r, 0],
                ridge_xy[r, 1],
                ridge_r2[r],
                rejected[r],
                bounds[k] if bounds is not None and k >= 0 else "",
            ])
        if rows:
            self.ridge_printer(rows)

    def log_result(self, result):
        self.result_printer([result.radius, result.x, result.y, result.phase, result.n_rejected])

    def finalize(self):
        self.vertex_printer.flush()
        self.ridge_printer.flush()
        self.result_printer.flush()
