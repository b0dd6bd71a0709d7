from __future__ import annotations
from pathlib import Path
from typing import List
from photosheet.imaging.catalog import get_photo_size, get_print_layout
from photosheet.models.settings import SheetSettings
from photosheet.workers.sheet_worker import SheetWorker

def default_output_namer(p: Path, settings: SheetSettings) -> Path:
    base = p.stem
    ext = settings.export_format.value.lower()
    size, layout = get_photo_size(settings.size_id), get_print_layout(settings.layout_id)
    stem = f"{base}__{size.id}_{layout.id}_{settings.dpi}dpi"
    out = Path(settings.output_dir) / f"{stem}.{ext}"
    i = 1
    while out.exists():
        out = Path(settings.output_dir) / f"{stem}_{i}.{ext}"
        i += 1
    return out

class JobController:
    def __init__(self, ui, logger):
        self.ui = ui
        self.logger = logger
        self.worker: SheetWorker | None = None

    def start(self, files: List[Path], settings: SheetSettings) -> bool:
        if self.worker and self.worker.isRunning():
            self.logger.warning("A print batch is already running")
            return False
        self.worker = SheetWorker(files, settings, default_output_namer)
        self._wire_worker(self.worker)
        self.worker.start()
        return True

    def cancel(self):
        if self.worker and self.worker.isRunning():
            self.worker.cancel()

    def _wire_worker(self, w: SheetWorker):
        w.file_started.connect(lambda f: self.ui.on_file_started(f))
        w.file_progress.connect(lambda f, p: self.ui.on_file_progress(f, p))
        w.file_done.connect(lambda f: self.ui.on_file_done(f))
        w.error.connect(lambda msg: self.ui.on_error(msg))
        w.all_done.connect(lambda: self.ui.on_all_done())
        w.log_line.connect(lambda line: self.ui.append_log(line))
