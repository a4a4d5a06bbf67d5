"""Export JSON schemas for FlightSearchParams and SearchFlightsResponse."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel

from backend.app.models import FlightSearchParams, SearchFlightsResponse
from backend.app.utils.logging import configure_logging

logger = logging.getLogger(__name__)

SCHEMA_MODELS: tuple[type[BaseModel], ...] = (FlightSearchParams, SearchFlightsResponse)


def export_schemas(schemas_dir: Path) -> list[Path]:
    """Write one by-alias JSON schema per contract model into schemas_dir."""
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for model in SCHEMA_MODELS:
        schema = model.model_json_schema(by_alias=True)
        path = schemas_dir / f"{model.__name__}.schema.json"
        with open(path, "w") as f:
            json.dump(schema, f, indent=2)
        logger.info(f"Exported {model.__name__} schema to {path}")
        written.append(path)
    return written


def main() -> None:
    """Export schemas to docs/schemas/."""
    configure_logging()
    export_schemas(Path("docs/schemas"))


if __name__ == "__main__":
    main()
