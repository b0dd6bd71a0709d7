from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, List
from PySide6.QtCore import QThread, Signal
from photosheet.models.settings import SheetSettings
from photosheet.imaging.pipeline import process_and_save
from photosheet.utils.logging_utils import QtTailHandler, log_section

log = logging.getLogger("photosheet.worker")

class SheetWorker(QThread):
    file_started = Signal(str)
    file_progress = Signal(str, int)
    file_done = Signal(str)
    error = Signal(str)
    all_done = Signal()
    log_line = Signal(str)

    def __init__(self, files: List[Path], settings: SheetSettings,
                 output_namer: Callable[[Path, SheetSettings], Path]):
        super().__init__()
        self._files = list(files)
        self._settings = settings
        self._cancel = False
        self._output_namer = output_namer

    def cancel(self):
        self._cancel = True

    def run(self):
        tail = QtTailHandler(self.log_line.emit)
        pkg_logger = logging.getLogger("photosheet")
        if pkg_logger.level == logging.NOTSET:
            # build_logger() not called; log_line still needs INFO records
            pkg_logger.setLevel(logging.INFO)
        pkg_logger.addHandler(tail)
        try:
            with log_section(f"BATCH: {len(self._files)} photo(s) -> {self._settings.layout_id}", log):
                self._run_batch()
        finally:
            pkg_logger.removeHandler(tail)
            self.all_done.emit()

    def _run_batch(self):
        for f in self._files:
            if self._cancel:
                log.info("Batch cancelled")
                break
            fname = str(f)
            try:
                self.file_started.emit(fname)
                out_path = self._output_namer(Path(f), self._settings)
                process_and_save(
                    f,
                    out_path,
                    self._settings,
                    progress_cb=lambda p, fname=fname: self.file_progress.emit(fname, int(p)),
                )
                self.file_done.emit(str(out_path))
            except Exception as e:
                log.error("%s: %s", Path(f).name, e)
                self.error.emit(f"{Path(f).name}: {e}")
                if self._settings.stop_on_first_error:
                    break
