# sticker_dispatcher.py
import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed

from sticker_image_manager import compose_sticker

logger = logging.getLogger(__name__)


class StickerResult:
    def __init__(self, code, label, path=None, error=None, cancelled=False):
        self.code = code
        self.label = label
        self.path = path
        self.error = error
        self.cancelled = cancelled

    @property
    def ok(self):
        return self.error is None and not self.cancelled

    def __repr__(self):
        status = "ok" if self.ok else ("cancelled" if self.cancelled else f"error={self.error!r}")
        return f"StickerResult(code={self.code!r}, {status})"


class DispatchReport:
    def __init__(self, results):
        self.results = results

    @property
    def succeeded(self):
        return [r for r in self.results if r.ok]

    @property
    def failed(self):
        return [r for r in self.results if not r.ok]

    @property
    def ok(self):
        return not self.failed


def run(entries, font_asset, out_dir, workers=None, fail_fast=False) -> DispatchReport:
    """
    Render one sticker per (code, label) entry on a thread pool.

    Returns once every submitted task has finished. Errors are kept
    on each task's result; with fail_fast, tasks that have not started
    yet are cancelled after the first failure.
    """
    workers = workers or os.cpu_count() or 1
    results = []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {}
        for code, label in entries.items():
            future = executor.submit(compose_sticker, code, label, font_asset, out_dir)
            futures[future] = (code, label)

        for future in as_completed(futures):
            code, label = futures[future]
            if future.cancelled():
                results.append(StickerResult(code, label, cancelled=True))
                continue

            try:
                path = future.result()
            except Exception as e:
                logger.error("Failed to generate sticker for %s: %s", code, e)
                results.append(StickerResult(code, label, error=e))
                if fail_fast:
                    for pending in futures:
                        pending.cancel()
                continue

            results.append(StickerResult(code, label, path=path))

    return DispatchReport(results)
