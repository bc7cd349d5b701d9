import json
from pathlib import Path

from lazylog.config import LevelConfig


OUTPUT_DIR = Path("docs/schemas")
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)


MODELS = {
    "level_config.schema.json": LevelConfig,
}


def main() -> None:
    for filename, model in MODELS.items():
        schema = model.model_json_schema()
        (OUTPUT_DIR / filename).write_text(
            json.dumps(schema, indent=2),
            encoding="utf-8",
        )


if __name__ == "__main__":
    main()
