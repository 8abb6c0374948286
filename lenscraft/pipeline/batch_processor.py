"""
Batch Processor Pipeline
Loads, processes and saves single files or whole directories.
A failing file never stops its siblings; only an uncreatable output
directory aborts the run.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

from tqdm import tqdm

from ..config import BATCH_WORKERS
from ..models.processing_options import ProcessingOptions
from ..services.image_service import ImageService
from .image_processor import process_image

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """
    Outcome of a directory run.
    """
    processed: List[Tuple[Path, Path]] = field(default_factory=list)  # (input, output)
    failed: List[Tuple[Path, str]] = field(default_factory=list)      # (input, error)

    @property
    def ok(self) -> bool:
        return not self.failed


def process_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    options: ProcessingOptions,
    *,
    image_service: ImageService = ImageService(),
) -> Path:
    """
    Decode ``input_path``, run the pipeline, encode to ``output_path``.
    Load and save errors propagate to the caller.
    """
    output_path = Path(output_path)
    img = image_service.load(input_path)

    process_image(img, options)

    img.path = output_path
    image_service.save(img, quality=options.quality)
    return output_path


def _output_path_for(input_path: Path, input_dir: Path, output_dir: Path) -> Path:
    return output_dir / input_path.relative_to(input_dir)


def _process_one(
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    image_service: ImageService,
) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    return process_file(input_path, output_path, options, image_service=image_service)


def process_batch(
    input_dir: Union[str, Path],
    output_dir: Union[str, Path],
    options: ProcessingOptions,
    *,
    workers: int = BATCH_WORKERS,
    recursive: bool = False,
    image_service: ImageService = ImageService(),
) -> BatchResult:
    """
    Process every supported image in ``input_dir`` into ``output_dir``.

    Args:
        input_dir: Folder to scan (non-image files are skipped)
        output_dir: Destination folder, created if missing
        options: Operations applied to every file
        workers: Files processed concurrently; 1 means sequential
        recursive: Descend into sub-folders, mirroring them in the output
        image_service: Service for image I/O

    Returns:
        BatchResult: per-file successes and failures

    Raises:
        OSError: if ``output_dir`` cannot be created (no output is possible)
        NotADirectoryError: if ``input_dir`` is not a directory
    """
    input_dir = Path(input_dir)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    jobs = [
        (p, _output_path_for(p, input_dir, output_dir))
        for p in image_service.iter_image_paths(input_dir, recursive=recursive)
    ]
    result = BatchResult()
    if not jobs:
        logger.warning(f"No supported images found in {input_dir}")
        return result

    workers = max(1, min(workers, len(jobs), os.cpu_count() or 1))
    logger.info(f"Processing {len(jobs)} files from {input_dir} with {workers} worker(s)")

    def record(src: Path, dst: Path, error: Exception | None) -> None:
        if error is None:
            result.processed.append((src, dst))
            print(f"Processed: {src.name} -> {dst}")
        else:
            result.failed.append((src, str(error)))
            logger.error(f"Error processing {src.name}: {error}")

    with tqdm(total=len(jobs), desc="batch", ncols=70) as progress:
        if workers == 1:
            for src, dst in jobs:
                try:
                    _process_one(src, dst, options, image_service)
                    record(src, dst, None)
                except Exception as err:
                    record(src, dst, err)
                progress.update(1)
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {
                    executor.submit(_process_one, src, dst, options, image_service): (src, dst)
                    for src, dst in jobs
                }
                for future in as_completed(futures):
                    src, dst = futures[future]
                    try:
                        future.result()
                        record(src, dst, None)
                    except Exception as err:
                        record(src, dst, err)
                    progress.update(1)

    logger.info(f"Batch finished: {len(result.processed)} processed, {len(result.failed)} failed")
    return result
