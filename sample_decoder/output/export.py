"""Export of decoded datasets to NumPy arrays with JSON sidecars."""

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

import numpy as np

from sample_decoder.storage import AudioDataset

logger = logging.getLogger(__name__)


class DatasetExporter:
    """Write a dataset's samples to ``<stem>.npy`` and its description to ``<stem>.json``."""

    def export(self, dataset: AudioDataset, output_dir: Path, stem: str) -> tuple[Path, Path]:
        """Export ``dataset`` into ``output_dir``.

        Args:
            dataset: The decoded dataset
            output_dir: Destination directory, created if missing
            stem: File name stem shared by both outputs

        Returns:
            Tuple of (array_path, metadata_path)

        Raises:
            OSError: If either file cannot be written
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        array_path = output_dir / f"{stem}.npy"
        metadata_path = output_dir / f"{stem}.json"

        np.save(array_path, dataset.data, allow_pickle=bool(dataset.data.dtype == object))
        self._write_json_atomic(self.describe(dataset), metadata_path)

        logger.debug(f"Exported {dataset!r} to {array_path} and {metadata_path}")
        return array_path, metadata_path

    def describe(self, dataset: AudioDataset) -> dict[str, Any]:
        """Return the JSON-serializable description of ``dataset``."""
        return {
            "source": dataset.source,
            "valueType": dataset.value_type,
            "valueUnit": dataset.value_unit,
            "resolvedType": dataset.resolved_type.value,
            "dims": list(dataset.dims),
            "metadata": dataset.metadata.model_dump(by_alias=True),
            "axes": [axis._asdict() for axis in dataset.axes],
        }

    def _write_json_atomic(self, data: dict[str, Any], output_path: Path) -> None:
        """Write JSON to a temp file beside ``output_path`` then rename it into place."""
        json_content = json.dumps(data, indent=2)
        with tempfile.NamedTemporaryFile(
            mode="w",
            dir=output_path.parent,
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        ) as temp_file:
            temp_file.write(json_content)
            temp_path = Path(temp_file.name)

        try:
            temp_path.replace(output_path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise
