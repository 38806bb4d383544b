"""JSON exporter."""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from fieldmap.config import settings
from fieldmap.mapper.mapping import Mapper


class JsonExporter:
    """Export a mapper field table to JSON."""

    def __init__(self, indent: Optional[int] = None):
        self.indent = settings.json_indent if indent is None else indent

    def describe(self, mapper: Mapper, model_name: str) -> Dict[str, Any]:
        """Describe the field table of a mapper."""
        config = mapper.config
        return {
            "metadata": {
                "created_at": datetime.now().isoformat(),
                "model": model_name,
                "total_fields": len(config.fields),
                "dto_factory": getattr(config.dto_factory, "__name__", None),
                "entity_factory": getattr(config.entity_factory, "__name__", None),
            },
            "fields": [rule.to_dict() for rule in config.fields],
        }

    def export(self, output_file: Path, mapper: Mapper, model_name: str) -> None:
        """Export to JSON file."""
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w") as f:
            json.dump(self.describe(mapper, model_name), f, indent=self.indent, default=str)
